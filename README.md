# palabracalc

An interactive console calculator that evaluates arithmetic written with
Spanish number words, such as `veinte + treintaycinco * (dos - uno)`.
Access is guarded by a small user file, and notable events are appended
to a timestamped log.

## Installing

    pip install .

For the test suite:

    pip install ".[test]"
    pytest

## Running

    palabracalc

This starts the calculator with a login loop. It asks for a user name
and then a password. A name that is not in the user file is asked for
again without using up an attempt; three wrong passwords end the program
with exit status 1. After logging in, a menu is shown:

- administrators: `1` create a user, `2` calculate from text, `3` log out,
  `4` quit
- regular users: `1` calculate from text, `2` log out, `3` quit

Logging out returns to the login prompt; quitting exits with status 0.
Answers to prompts are limited in length (one character for menu
choices, 20 for names and passwords), and every character other than
letters, digits, `_` and `-` is removed from them.

    palabracalc-classic

This starts the simpler single-screen variant: name and password are
asked for together (three attempts), then a menu offers `1` create a
user, `2` calculate, `3` quit to administrators, and `1` calculate,
`2` quit to everyone else. Each answer must be a single word; names and
passwords longer than 20 characters are refused when creating a user.
A menu answer that is not a number ends the program with exit status 1.
Results are shown as whole numbers, truncated toward zero.

Both commands take two options:

- `--users PATH`: the user file (default `users.txt` in the current
  directory)
- `--log PATH`: the event log (default `log.txt` in the current
  directory)

If the user file does not exist, both commands report it and exit with
status 1.

## Writing operations

Spaces are ignored and letters are lower-cased before parsing. Accepted
words are:

- `cero` to `diez`
- `once` to `diecinueve`, and `veintiuno` to `veintinueve`
- `veinte`, `treinta`, `cuarenta`, `cincuenta`, `sesenta`, `setenta`,
  `ochenta`, `noventa`
- a ten and a unit joined by `y`, e.g. `cuarentaydos` or `cuarenta y dos`

Operators are `+`, `-`, `*`, `/` and parentheses, with the usual
precedence. Any unknown word makes the whole operation invalid and it is
asked for again. Division by zero gives `inf` or `nan` in `palabracalc`;
`palabracalc-classic` treats it as an invalid operation. After each
result the program asks whether to do another operation (`1` yes,
`2` no).

## The user file

Each line of the user file holds `name password`, or
`admin name password` for an administrator, with every character XOR-ed
with the character `N`. To build the file from a plain-text list:

```python
from palabracalc.cipher import encrypt_file

encrypt_file("usersE.txt", "users.txt")
```

where `usersE.txt` contains lines such as:

    admin alice password
    bob password

Administrators can add further accounts from the menu. The file can also
be handled directly with `palabracalc.users.UserStore` (`records`,
`exists`, `find`, `add`), and single lines decoded with
`palabracalc.users.parse_record`.

## Using the pieces directly

```python
from palabracalc.words import words_to_expression
from palabracalc.expression import evaluate

expr = words_to_expression("Veinte + treinta y cinco * dos")
print(expr)             # 20+35*2
print(evaluate(expr))   # 90.0
```

`palabracalc.words` also provides `normalize` and `word_to_number`.
`palabracalc.expression` provides `tokenize`, `infix_to_postfix`,
`precedence`, `eval_postfix` (floating point) and `eval_postfix_int`
(integer arithmetic with truncating division); unknown words and
malformed expressions raise `ExpressionError`.

## What it does not do

Passwords are not hashed or encrypted: the XOR step only hides them from
a casual glance, and anyone with the user file can recover them. There is
no way to change or delete an account from the program; edit the
plain-text list and rebuild the file with `encrypt_file` instead. Numbers
above 99 cannot be written in words.