"""Login loop and main menu of the calculator."""

from __future__ import annotations

import argparse
import sys
from enum import Enum, auto

from palabracalc.console import Console
from palabracalc.session import TextCalculator
from palabracalc.users import AccountManager, UserStore

HEADER = "Laboratorio 01 de seguridad\nCalculadora texto\n\n"


class _Action(Enum):
    CREATE_USER = auto()
    CALCULATE = auto()
    LOGOUT = auto()
    QUIT = auto()


_ADMIN_MENU = {
    1: _Action.CREATE_USER,
    2: _Action.CALCULATE,
    3: _Action.LOGOUT,
    4: _Action.QUIT,
}
_USER_MENU = {
    1: _Action.CALCULATE,
    2: _Action.LOGOUT,
    3: _Action.QUIT,
}
_ADMIN_TEXT = "1. Crear usuario\n2. Calcular de Texto\n3. Cerrar Sesion\n4. Salir\n"
_USER_TEXT = "1. Calcular de Texto\n2. Cerrar Sesion\n3. Salir\n"


class Controller:
    """Authenticates users and dispatches their menu choices."""

    def __init__(
        self,
        accounts: AccountManager,
        calculator: TextCalculator,
        console: Console,
    ) -> None:
        self.accounts = accounts
        self.calculator = calculator
        self.console = console

    def run(self) -> int:
        """Log users in repeatedly; return 0 on quit, 1 when login fails."""
        while True:
            record = self.accounts.authenticate()
            if record is None:
                return 1
            if self.menu(record.admin):
                return 0

    def menu(self, is_admin: bool) -> bool:
        """Show the menu until logout (False) or quit (True)."""
        options = _ADMIN_MENU if is_admin else _USER_MENU
        text = _ADMIN_TEXT if is_admin else _USER_TEXT
        while True:
            self.console.write(HEADER)
            self.console.write(text)
            answer = self.console.read_input("Digite una opcion: ", 1)
            try:
                action = options.get(int(answer))
                if action is None:
                    self.console.write("Opcion invalida\n")
                elif action is _Action.CREATE_USER:
                    self.accounts.create_user()
                elif action is _Action.CALCULATE:
                    self.calculator.run()
                elif action is _Action.LOGOUT:
                    self.console.write("Cerrando Sesion.\n")
                    return False
                else:
                    return True
            except ValueError:
                self.console.write("Entrada no valida, intente de nuevo.\n")


def main(argv: list[str] | None = None) -> int:
    """Start the calculator on the terminal."""
    parser = argparse.ArgumentParser(
        prog="palabracalc",
        description="Calculator for operations written in Spanish words.",
    )
    parser.add_argument("--users", default="users.txt", help="encrypted users file")
    parser.add_argument("--log", default="log.txt", help="event log file")
    args = parser.parse_args(argv)

    console = Console(log_path=args.log)
    controller = Controller(
        AccountManager(UserStore(args.users), console),
        TextCalculator(console),
        console,
    )
    try:
        return controller.run()
    except (EOFError, KeyboardInterrupt):
        console.write("\n")
        return 1


if __name__ == "__main__":
    sys.exit(main())