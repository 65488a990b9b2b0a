"""User database stored as XOR-encrypted lines, and account handling."""

from __future__ import annotations

import os
import re
import sys
from dataclasses import dataclass
from pathlib import Path

from palabracalc.cipher import xor_cipher
from palabracalc.console import Console

ADMIN_TAG = "admin"
MAX_ATTEMPTS = 3
MAX_FIELD_LENGTH = 20

_FIELD = re.compile(r"[^ \t\n\v\f\r]+")
_CONTRASENA_PROMPT = "Digite la contrasena: "
_CONFIRM_PROMPT = "Digite la contrasena nuevamente: "


@dataclass(frozen=True)
class UserRecord:
    """One account: its name, password and whether it is an administrator."""

    name: str
    password: str
    admin: bool = False

    def to_line(self) -> str:
        """Return the plain-text line that stores this record."""
        fields = [self.name, self.password]
        if self.admin:
            fields.insert(0, ADMIN_TAG)
        return " ".join(fields)


def parse_record(line: str) -> UserRecord:
    """Decrypt one stored line and split it into a record.

    A trailing carriage return is ignored; missing fields become empty.
    """
    if line.endswith("\r"):
        line = line[:-1]
    fields = _FIELD.findall(xor_cipher(line))
    admin = bool(fields) and fields[0] == ADMIN_TAG
    if admin:
        fields = fields[1:]
    padded = [*fields, "", ""]
    name, password = padded[:2]
    return UserRecord(name, password, admin)


class UserStore:
    """The encrypted users file."""

    def __init__(self, path: str | os.PathLike[str] = "users.txt") -> None:
        self.path = Path(path)

    def records(self) -> list[UserRecord]:
        """Return every stored record; raises FileNotFoundError if the file is missing."""
        lines = self.path.read_bytes().decode("latin-1").split("\n")
        if lines and lines[-1] == "":
            lines.pop()
        return [parse_record(line) for line in lines]

    def _records_or_empty(self) -> list[UserRecord]:
        try:
            return self.records()
        except FileNotFoundError:
            return []

    def exists(self, name: str) -> bool:
        """Tell whether an account called ``name`` is stored."""
        return any(record.name == name for record in self._records_or_empty())

    def find(self, name: str, password: str) -> UserRecord | None:
        """Return the first record matching both name and password."""
        return next(
            (
                record
                for record in self._records_or_empty()
                if record.name == name and record.password == password
            ),
            None,
        )

    def add(self, name: str, password: str, admin: bool) -> UserRecord:
        """Append a new encrypted record to the file and return it."""
        record = UserRecord(name, password, admin)
        with open(self.path, "ab") as users_file:
            users_file.write((xor_cipher(record.to_line()) + "\n").encode("latin-1"))
        return record


class AccountManager:
    """Logs users in and creates new accounts through the console."""

    def __init__(self, store: UserStore, console: Console) -> None:
        self.store = store
        self.console = console

    def authenticate(self) -> UserRecord | None:
        """Ask for credentials, allowing three wrong passwords.

        Returns the matching record, or None when the users file is missing
        or every attempt failed.
        """
        try:
            self.store.records()
        except FileNotFoundError:
            print("Error: No se encontro el archivo", file=sys.stderr)
            return None

        attempts = 0
        while attempts < MAX_ATTEMPTS:
            name = self.console.read_input("Digite nombre usuario : ", MAX_FIELD_LENGTH)
            if not self.store.exists(name):
                self.console.write("Error: El usuario no existe\n")
                continue
            password = self.console.read_input(_CONTRASENA_PROMPT, MAX_FIELD_LENGTH)
            record = self.store.find(name, password)
            if record is not None:
                self.console.log("login successful: " + name)
                greeting = "Cuenta Administrador " if record.admin else ""
                self.console.write(f"{greeting}Bienvenido: {name}!\n")
                return record
            self.console.log("login error: " + name)
            self.console.write("Error: usuario o contrasena invalidos\n")
            attempts += 1
            if attempts < MAX_ATTEMPTS:
                self.console.write(f"Intentos restantes: {MAX_ATTEMPTS - attempts}\n")

        self.console.write("Agoto el numero de intentos\n")
        return None

    def create_user(self) -> UserRecord | None:
        """Ask for a new account and store it.

        Returns the stored record, or None when the file cannot be written.
        Raises ValueError when the administrator answer is not a number.
        """
        while True:
            name = self.console.read_input(
                "Digite el nombre Usuario nuevo: ", MAX_FIELD_LENGTH
            )
            if not self.store.exists(name):
                break
            self.console.log("Error user creation, user already in use")
            self.console.write("Nombre de usuario ya existe\n")

        while True:
            password = self.console.read_input(_CONTRASENA_PROMPT, MAX_FIELD_LENGTH)
            confirmation = self.console.read_input(_CONFIRM_PROMPT, MAX_FIELD_LENGTH)
            if password == confirmation:
                break
            self.console.log("Error user creation, password mismatch")
            self.console.write("Las contrasenas no coinciden\n")

        while True:
            choice = int(
                self.console.read_input(
                    "Es un usuario administrador ? 1-) Si , 2-) No: \n", 1
                )
            )
            if choice in (1, 2):
                break
            self.console.write("Opcion invalida\n")

        try:
            record = self.store.add(name, password, choice == 1)
        except OSError:
            print("Error al acceder a archivo!", file=sys.stderr)
            return None
        self.console.log("User added succesfully " + name)
        self.console.write("Usuario anadido correctamente\n")
        return record