import io

import pytest

from palabracalc.cipher import xor_cipher
from palabracalc.console import Console
from palabracalc.users import AccountManager, UserRecord, UserStore, parse_record

PASSWORD = "password"


def make_store(tmp_path, with_users=True):
    store = UserStore(tmp_path / "users.txt")
    if with_users:
        password = PASSWORD
        store.add("bob", password=password, admin=False)
        store.add("root", password=password, admin=True)
    return store


def make_manager(tmp_path, store, text):
    out = io.StringIO()
    console = Console(io.StringIO(text), out, tmp_path / "log.txt")
    return AccountManager(store, console), out


def test_parse_record_admin():
    line = xor_cipher("admin alice " + PASSWORD)
    assert parse_record(line) == UserRecord("alice", PASSWORD, True)


def test_parse_record_regular_with_carriage_return():
    line = xor_cipher("bob secret") + "\r"
    assert parse_record(line) == UserRecord("bob", "secret", False)


def test_parse_record_empty_line():
    assert parse_record("") == UserRecord("", "", False)


def test_record_line_round_trip():
    record = UserRecord("alice", PASSWORD, True)
    assert record.to_line() == "admin alice " + PASSWORD
    assert parse_record(xor_cipher(record.to_line())) == record


def test_add_writes_encrypted_line(tmp_path):
    store = make_store(tmp_path, with_users=False)
    password = PASSWORD
    store.add("bob", password=password, admin=False)
    raw = store.path.read_bytes()
    assert raw == (xor_cipher("bob " + PASSWORD) + "\n").encode("latin-1")
    assert b"bob" not in raw


def test_records_round_trip(tmp_path):
    store = make_store(tmp_path)
    assert store.records() == [
        UserRecord("bob", PASSWORD, False),
        UserRecord("root", PASSWORD, True),
    ]


def test_exists_and_find(tmp_path):
    store = make_store(tmp_path)
    assert store.exists("bob")
    assert not store.exists("carol")
    assert store.find("root", PASSWORD) == UserRecord("root", PASSWORD, True)
    assert store.find("bob", "secret") is None


def test_missing_file(tmp_path):
    store = make_store(tmp_path, with_users=False)
    with pytest.raises(FileNotFoundError):
        store.records()
    assert store.exists("bob") is False
    assert store.find("bob", PASSWORD) is None


def test_authenticate_regular_user(tmp_path):
    manager, out = make_manager(tmp_path, make_store(tmp_path), "bob\npassword\n")
    assert manager.authenticate() == UserRecord("bob", PASSWORD, False)
    assert "Bienvenido: bob!" in out.getvalue()
    assert "Cuenta Administrador" not in out.getvalue()
    assert "login successful: bob" in (tmp_path / "log.txt").read_text()


def test_authenticate_admin(tmp_path):
    manager, out = make_manager(tmp_path, make_store(tmp_path), "root\npassword\n")
    record = manager.authenticate()
    assert record.admin is True
    assert "Cuenta Administrador Bienvenido: root!" in out.getvalue()


def test_authenticate_unknown_user_asks_again(tmp_path):
    manager, out = make_manager(
        tmp_path, make_store(tmp_path), "nobody\nbob\npassword\n"
    )
    assert manager.authenticate().name == "bob"
    assert "Error: El usuario no existe" in out.getvalue()


def test_authenticate_runs_out_of_attempts(tmp_path):
    manager, out = make_manager(tmp_path, make_store(tmp_path), "bob\nwrong\n" * 3)
    assert manager.authenticate() is None
    text = out.getvalue()
    assert "Agoto el numero de intentos" in text
    assert "Intentos restantes: 1" in text
    assert "login error: bob" in (tmp_path / "log.txt").read_text()


def test_authenticate_without_users_file(tmp_path, capsys):
    store = make_store(tmp_path, with_users=False)
    manager, _ = make_manager(tmp_path, store, "bob\npassword\n")
    assert manager.authenticate() is None
    assert "Error: No se encontro el archivo" in capsys.readouterr().err


def test_create_regular_user(tmp_path):
    store = make_store(tmp_path)
    manager, out = make_manager(tmp_path, store, "carol\npassword\npassword\n2\n")
    record = manager.create_user()
    assert record == UserRecord("carol", PASSWORD, False)
    assert store.find("carol", PASSWORD) == record
    assert "Usuario anadido correctamente" in out.getvalue()


def test_create_user_rejects_existing_name(tmp_path):
    store = make_store(tmp_path)
    manager, out = make_manager(
        tmp_path, store, "bob\ncarol\npassword\npassword\n2\n"
    )
    assert manager.create_user().name == "carol"
    assert "Nombre de usuario ya existe" in out.getvalue()


def test_create_user_rejects_long_name(tmp_path):
    store = make_store(tmp_path)
    text = "a" * 21 + "\ncarol\npassword\npassword\n2\n"
    manager, out = make_manager(tmp_path, store, text)
    assert manager.create_user().name == "carol"
    assert "excede el limite de 20" in out.getvalue()


def test_create_user_password_mismatch(tmp_path):
    store = make_store(tmp_path)
    manager, out = make_manager(
        tmp_path, store, "carol\npassword\nsecret\npassword\npassword\n1\n"
    )
    record = manager.create_user()
    assert record == UserRecord("carol", PASSWORD, True)
    assert "Las contrasenas no coinciden" in out.getvalue()


def test_create_user_invalid_choice(tmp_path):
    store = make_store(tmp_path)
    manager, out = make_manager(
        tmp_path, store, "carol\npassword\npassword\n3\n1\n"
    )
    assert manager.create_user().admin is True
    assert "Opcion invalida" in out.getvalue()


def test_create_user_non_numeric_choice_raises(tmp_path):
    store = make_store(tmp_path)
    manager, _ = make_manager(tmp_path, store, "carol\npassword\npassword\n-\n")
    with pytest.raises(ValueError):
        manager.create_user()
    assert not store.exists("carol")