"""Conversion of Spanish number words into arithmetic expressions."""

from __future__ import annotations

import re

from palabracalc.expression import ExpressionError

UNIDADES = {
    "cero": 0, "uno": 1, "dos": 2, "tres": 3, "cuatro": 4, "cinco": 5,
    "seis": 6, "siete": 7, "ocho": 8, "nueve": 9, "diez": 10,
}

ESPECIALES = {
    "once": 11, "doce": 12, "trece": 13, "catorce": 14,
    "quince": 15, "dieciseis": 16, "diecisiete": 17,
    "dieciocho": 18, "diecinueve": 19, "veintiuno": 21,
    "veintidos": 22, "veintitres": 23, "veinticuatro": 24,
    "veinticinco": 25, "veintiseis": 26, "veintisiete": 27,
    "veintiocho": 28, "veintinueve": 29,
}

DECENAS = {
    "veinte": 20, "treinta": 30, "cuarenta": 40, "cincuenta": 50,
    "sesenta": 60, "setenta": 70, "ochenta": 80, "noventa": 90,
}

_OPERATOR_SPLIT = re.compile(r"([+\-*/()])")


def normalize(text: str) -> str:
    """Remove spaces and lower-case ASCII letters."""
    return "".join(
        char.lower() if char.isascii() else char for char in text if char != " "
    )


def word_to_number(word: str) -> int:
    """Return the value of one number word such as ``treintaycinco``.

    Raises ExpressionError when the word is not recognised.
    """
    for table in (ESPECIALES, DECENAS, UNIDADES):
        if word in table:
            return table[word]
    tens, separator, units = word.partition("y")
    if separator:
        tens_value = DECENAS.get(tens, 0)
        units_value = UNIDADES.get(units, 0)
        if tens_value > 0 and units_value > 0:
            return tens_value + units_value
    raise ExpressionError(f"palabra no reconocida: {word!r}")


def words_to_expression(text: str) -> str:
    """Turn text like ``"Dos + tres"`` into a digit expression.

    Operators and parentheses are kept as they are; every piece between them
    must be a number word.  Raises ExpressionError otherwise.
    """
    pieces = _OPERATOR_SPLIT.split(normalize(text))
    parts: list[str] = []
    for position, piece in enumerate(pieces):
        if position % 2:
            parts.append(piece)
        elif piece:
            parts.append(str(word_to_number(piece)))
    return "".join(parts)