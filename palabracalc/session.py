"""Interactive calculator session for operations written in words."""

from __future__ import annotations

from palabracalc.console import Console
from palabracalc.expression import ExpressionError, evaluate
from palabracalc.words import words_to_expression

PROMPT = "Escriba la operacion:\n"
CONTINUE_PROMPT = "Quiere hacer otra operacion? 1-) Si , 2-) No: \n"


class TextCalculator:
    """Reads operations such as ``dos + tres`` and prints their results."""

    def __init__(self, console: Console) -> None:
        self.console = console

    def run(self) -> None:
        """Evaluate operations until the user chooses to stop."""
        while True:
            line = self.console.read_line(PROMPT)
            try:
                expression = words_to_expression(line)
            except ExpressionError:
                self.console.write(
                    "Error: La entrada contiene caracteres no válidos.\n"
                )
                expression = ""
            if not expression:
                self.console.write("Por favor, ingrese una operación válida.\n")
                continue
            try:
                result = evaluate(expression)
            except ExpressionError as error:
                self.console.write(f"Error al procesar la operación: {error}\n")
            else:
                self.console.write(f"Resultado: {result:g}\n")
            if not self.ask_continue():
                return

    def ask_continue(self) -> bool:
        """Ask whether to do another operation; True for yes, False for no."""
        while True:
            self.console.write(CONTINUE_PROMPT)
            answer = self.console.read_input("", 1)
            try:
                option = int(answer)
            except ValueError:
                option = None
            if option == 1:
                return True
            if option == 2:
                return False
            self.console.write("Entrada invalida. Por favor escriba 1 o 2.\n")