"""The original single-screen calculator: login, user creation and word arithmetic."""

from __future__ import annotations

import argparse
import math
import os
import re
import sys
from pathlib import Path
from typing import TextIO

from palabracalc.cipher import xor_cipher
from palabracalc.console import Console
from palabracalc.expression import (
    ExpressionError,
    eval_postfix,
    infix_to_postfix,
    tokenize,
)
from palabracalc.users import ADMIN_TAG, MAX_ATTEMPTS, MAX_FIELD_LENGTH, UserRecord
from palabracalc.words import words_to_expression

HEADER = "Laboratorio 01 de seguridad\nCalculadora texto\n\n"
OPERATION_PROMPT = "Escriba la operacion:\n"
CONTINUE_PROMPT = "Quiere hacer otra operacion? 1-) Si , 2-) No:\n"
_ADMIN_TEXT = "1. Crear usuario\n2. Calcular de Texto\n3. salir\n"
_USER_TEXT = "1. Calcular de Texto\n2. Salir\n"
_CONTRASENA_PROMPT = "Digite la contrasena: "
_CONFIRM_PROMPT = "Digite la contrasena nuevamente: "

_FIELD = re.compile(r"[^ \t\n\v\f\r]+")
_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


def _to_int(text: str) -> int:
    """Read a leading integer from ``text``, ignoring anything after it."""
    match = _LEADING_INT.match(text)
    if match is None:
        raise ValueError(f"not a number: {text!r}")
    value = int(match.group(1))
    if not _INT_MIN <= value <= _INT_MAX:
        raise ValueError(f"number out of range: {text!r}")
    return value


def _credentials(plain: str) -> UserRecord:
    fields = _FIELD.findall(plain)
    admin = bool(fields) and fields[0] == ADMIN_TAG
    if admin:
        fields = fields[1:]
    padded = [*fields, "", ""]
    name, password = padded[:2]
    return UserRecord(name, password, admin)


class ClassicApp:
    """Interactive calculator with its own users file and event log."""

    def __init__(
        self,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        users_path: str | os.PathLike[str] = "users.txt",
        log_path: str | os.PathLike[str] = "log.txt",
    ) -> None:
        self.console = Console(stdin, stdout, log_path)
        self.users_path = Path(users_path)

    def _lines(self) -> list[str]:
        lines = self.users_path.read_bytes().decode("latin-1").split("\n")
        if lines and lines[-1] == "":
            lines.pop()
        return lines

    def _lines_or_empty(self) -> list[str]:
        try:
            return self._lines()
        except FileNotFoundError:
            return []

    def read_input(self, prompt: str) -> str:
        """Ask until the user enters exactly one word, and return it."""
        while True:
            words = _FIELD.findall(self.console.read_line(prompt))
            if not words:
                self.log("Error information not entered")
                self.console.write("Error no ha digitado.\n")
            elif len(words) > 1:
                self.log("Error invalid input")
                self.console.write("La entrada no es valida intelo de nuevo\n")
            else:
                return words[0]

    def log(self, event: str) -> None:
        """Append ``event`` with a timestamp to the log file."""
        self.console.log(event)

    def authenticate(self) -> UserRecord | None:
        """Ask for name and password, allowing three failed attempts.

        Returns the matching record, or None when the users file is missing
        or every attempt failed.
        """
        if not self.users_path.is_file():
            print("Error: No se encontro el archivo", file=sys.stderr)
            return None

        for attempt in range(1, MAX_ATTEMPTS + 1):
            name = self.read_input("Digite nombre usuario : ")
            password = self.read_input(_CONTRASENA_PROMPT)
            for line in self._lines_or_empty():
                record = _credentials(xor_cipher(line))
                if record.name == name and record.password == password:
                    self.log("login successful: " + name)
                    greeting = "Cuenta Administrador " if record.admin else ""
                    self.console.write(f"{greeting}Bienvenido: {name}!\n")
                    return record
            self.log("login error: " + name)
            self.console.write("Error: usuario o contrasena invalidos\n")
            if attempt < MAX_ATTEMPTS:
                self.console.write(f"Intentos restantes: {MAX_ATTEMPTS - attempt}\n")

        self.console.write("Agoto el numero de intentos\n")
        return None

    def user_exists(self, name: str) -> bool:
        """Tell whether the users file holds an account called ``name``."""
        for line in self._lines_or_empty():
            if line.endswith("\r"):
                line = line[:-1]
            plain = xor_cipher(line)
            fields = _FIELD.findall(plain)
            if plain.startswith(ADMIN_TAG):
                fields = fields[1:]
            if (fields[0] if fields else "") == name:
                return True
        return False

    def create_user(self) -> UserRecord | None:
        """Ask for a new account and append it, encrypted, to the users file.

        Returns the stored record, or None when the file cannot be written.
        Raises ValueError when the administrator answer is not a number.
        """
        while True:
            name = self.read_input("Digite el nombre Usuario nuevo: ")
            if len(name) > MAX_FIELD_LENGTH:
                self.log("Error user creation, invalid user name")
                self.console.write(
                    " Nombre de usuario excede la longitud permitida(20 caracteres).\n"
                )
                continue
            if self.user_exists(name):
                self.log("Error user creation, user already in use")
                self.console.write("Nombre de usuario ya existe\n")
                continue
            break

        while True:
            password = self.read_input(_CONTRASENA_PROMPT)
            if len(password) > MAX_FIELD_LENGTH:
                self.log("Error user creation, invalid password")
                self.console.write("Contrasena excede longitud permitida\n")
                continue
            confirmation = self.read_input(_CONFIRM_PROMPT)
            if password != confirmation:
                self.log("Error user creation, password mismatch")
                self.console.write("Las contrasenas no coinciden\n")
                continue
            break

        while True:
            choice = _to_int(
                self.read_input("Es un usuario administrador ? 1-) Si , 2-) No: \n")
            )
            if choice in (1, 2):
                break
            self.console.write("Opcion invalida\n")

        record = UserRecord(name, password, choice == 1)
        try:
            with open(self.users_path, "ab") as users_file:
                users_file.write(
                    (xor_cipher(record.to_line()) + "\n").encode("latin-1")
                )
        except OSError:
            print("Error al acceder a archivo!", file=sys.stderr)
            return None
        self.log("User added succesfully " + name)
        self.console.write("Usuario anadido correctamente\n")
        return record

    def calculate(self) -> list[int]:
        """Evaluate word operations until the user stops; return the results.

        Results are truncated toward zero.  Operations that cannot be read
        or evaluated are logged and asked for again.
        """
        results: list[int] = []
        while True:
            raw = self.console.read_line(OPERATION_PROMPT)
            try:
                value = eval_postfix(
                    infix_to_postfix(tokenize(words_to_expression(raw)))
                )
                if not math.isfinite(value):
                    raise ExpressionError("result is not a finite number")
            except ExpressionError:
                self.log("Non valid operation" + raw)
                continue

            result = int(value)
            results.append(result)
            self.console.write(f"Resultado: {result}\n")

            while True:
                self.console.write(CONTINUE_PROMPT)
                answer = _to_int(self.read_input(""))
                if answer == 1:
                    break
                if answer == 2:
                    return results
                self.console.write("Entrada invalida. Por favor escriba 1 o 2.\n")

    def menu(self, is_admin: bool) -> None:
        """Show the menu and run the chosen actions until the user leaves.

        Raises ValueError when an option is not a number.
        """
        text = _ADMIN_TEXT if is_admin else _USER_TEXT
        while True:
            self.console.write(HEADER)
            self.console.write(text)
            option = _to_int(self.read_input("Digite una opcion: "))
            if is_admin:
                if option == 1:
                    self.create_user()
                elif option == 2:
                    self.calculate()
                elif option == 3:
                    return
                else:
                    self.console.write("Opcion invalida\n")
            else:
                if option == 1:
                    self.calculate()
                elif option == 2:
                    return
                else:
                    self.console.write("Opcion invalida\n")

    def run(self) -> int:
        """Log in and show the menu; return 0 on exit, 1 when login fails."""
        record = self.authenticate()
        if record is None:
            return 1
        self.menu(record.admin)
        return 0


def main(argv: list[str] | None = None) -> int:
    """Start the classic calculator on the terminal."""
    parser = argparse.ArgumentParser(
        prog="palabracalc-classic",
        description="Calculator for operations written in Spanish words.",
    )
    parser.add_argument("--users", default="users.txt", help="encrypted users file")
    parser.add_argument("--log", default="log.txt", help="event log file")
    args = parser.parse_args(argv)

    app = ClassicApp(users_path=args.users, log_path=args.log)
    try:
        return app.run()
    except (EOFError, KeyboardInterrupt):
        app.console.write("\n")
        return 1
    except ValueError as error:
        print(f"Entrada no valida: {error}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())