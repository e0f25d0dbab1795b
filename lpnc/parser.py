"""Parse LPN source into a Neander assembly program."""

from __future__ import annotations

import re
import string
from pathlib import Path

from lpnc.program import Program

MAX_INSTRUCTIONS = 256
LINE_SIZE = 255
FIRST_VARIABLE_ADDRESS = 128
FIRST_TEMP_ADDRESS = 200

_WHITESPACE = " \t\n\r\v\f"
_ALNUM = frozenset(string.ascii_letters + string.digits)
_DIGITS = frozenset(string.digits)
_OPERATORS = "+-*/"
_HEADERS = ("PROGRAMA", "INICIO", "FIM")
_KEYWORDS = {
    "carrega": "LDA",
    "adiciona": "ADD",
    "subtrai": "SUB",
    "armazena": "STA",
    "para": "HLT",
}
_LEADING_INT = re.compile(r"[ \t\n\r\v\f]*([+-]?[0-9]+)")
_TOKEN_SEPARATORS = re.compile(r"[ \n]+")


def _is_number(term: str) -> bool:
    """True when every character is a digit (so also for the empty string)."""
    return all(ch in _DIGITS for ch in term)


def _leading_int(text: str) -> int:
    """Leading integer of ``text``, or 0 when it does not start with one."""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def _precedence(operator: str) -> int:
    if operator in "*/":
        return 2
    if operator in "+-":
        return 1
    return 0


def _read_lines(text: str, size: int = LINE_SIZE):
    """Yield chunks the way a fixed-size line reader would: at most ``size``
    characters, ending early after a newline."""
    pos = 0
    while pos < len(text):
        newline = text.find("\n", pos, pos + size)
        stop = newline + 1 if newline >= 0 else min(pos + size, len(text))
        yield text[pos:stop]
        pos = stop


class Compiler:
    """Translates LPN lines into instructions, tracking variable addresses."""

    def __init__(self) -> None:
        self.program = Program()
        self.variables: dict[str, int] = {}
        self._next_address = FIRST_VARIABLE_ADDRESS
        self._next_temp = FIRST_TEMP_ADDRESS

    # -- storage ---------------------------------------------------------

    def _variable(self, name: str) -> int:
        address = self.variables.get(name)
        if address is None:
            address = self._next_address
            self._next_address += 1
            self.variables[name] = address
        return address

    def _temporary(self) -> int:
        address = self._next_temp
        self._next_temp += 1
        return address

    def _operand(self, term: str) -> int:
        if _is_number(term):
            return int(term) if term else 0
        return self._variable(term)

    # -- emission --------------------------------------------------------

    def _emit(self, *instructions: tuple[str, int]) -> None:
        for operation, argument in instructions:
            if len(self.program) < MAX_INSTRUCTIONS:
                self.program.add(operation, argument)

    def _patch(self, index: int, target: int) -> None:
        if index < len(self.program):
            self.program.instructions[index].argument = target

    def _multiply(self, multiplicand: int, multiplier: int) -> None:
        counter = self._temporary()
        result = self._temporary()
        zero = self._temporary()
        self._emit(
            ("LDA", 0),
            ("STA", result),
            ("STA", zero),
            ("STA", counter + 1),
            ("LDA", multiplier),
            ("STA", counter),
        )
        loop = len(self.program)
        self._emit(("LDA", counter), ("SUB", counter + 1))
        exit_jump = len(self.program)
        self._emit(
            ("JZ", 0),
            ("LDA", result),
            ("ADD", multiplicand),
            ("STA", result),
            ("LDA", counter),
            ("SUB", 1),
            ("STA", counter),
            ("JMP", loop),
        )
        self._patch(exit_jump, len(self.program))
        self._emit(("LDA", result))

    def _divide(self, dividend: int, divisor: int) -> None:
        quotient = self._temporary()
        remainder = self._temporary()
        divisor_copy = self._temporary()
        self._emit(
            ("LDA", 0),
            ("STA", quotient),
            ("LDA", dividend),
            ("STA", remainder),
            ("LDA", divisor),
            ("STA", divisor_copy),
        )
        loop = len(self.program)
        self._emit(("LDA", remainder), ("SUB", divisor_copy))
        exit_jump = len(self.program)
        self._emit(
            ("JN", 0),
            ("STA", remainder),
            ("LDA", quotient),
            ("ADD", 1),
            ("STA", quotient),
            ("JMP", loop),
        )
        self._patch(exit_jump, len(self.program))
        self._emit(("LDA", quotient))

    def _apply(self, operator: str, operands: list[int]) -> None:
        right = operands.pop() if operands else -1
        left = operands.pop() if operands else -1
        temp = self._temporary()
        self._emit(("LDA", left))
        if operator == "+":
            self._emit(("ADD", right))
        elif operator == "-":
            self._emit(("SUB", right))
        elif operator == "*":
            self._emit(("STA", temp))
            self._multiply(temp, right)
        elif operator == "/":
            self._emit(("STA", temp))
            self._divide(temp, right)
        self._emit(("STA", temp))
        operands.append(temp)

    # -- statements ------------------------------------------------------

    def _compile_expression(self, target: str, expression: str) -> None:
        cleaned = "".join(ch for ch in expression if ch not in _WHITESPACE)
        operators: list[str] = []
        operands: list[int] = []
        term: list[str] = []

        for ch in cleaned:
            if ch in _ALNUM:
                term.append(ch)
                continue
            if term:
                operands.append(self._operand("".join(term)))
                term.clear()
            if ch == "(":
                operators.append(ch)
            elif ch == ")":
                while operators and operators[-1] != "(":
                    self._apply(operators.pop(), operands)
                if operators:
                    operators.pop()
            elif ch in _OPERATORS:
                while (
                    operators
                    and operators[-1] != "("
                    and _precedence(operators[-1]) >= _precedence(ch)
                ):
                    self._apply(operators.pop(), operands)
                operators.append(ch)

        if term:
            operands.append(self._operand("".join(term)))
        while operators:
            self._apply(operators.pop(), operands)

        source = operands.pop() if operands else 0
        self._emit(("LDA", source))
        self._emit(("STA", self._variable(target)))

    def _assign(self, target: str, value: str) -> None:
        address = self._variable(target)
        if _is_number(value):
            source = int(value) if value else 0
        else:
            source = self.variables.get(value, 0)
        self._emit(("LDA", source), ("STA", address))

    def _assignment_line(self, line: str) -> None:
        target, sep, expression = line[:LINE_SIZE].partition("=")
        if not sep:
            return
        target = target.strip(_WHITESPACE)
        expression = expression.split(";", 1)[0].strip(_WHITESPACE)
        if any(op in expression for op in _OPERATORS):
            self._compile_expression(target, expression)
        else:
            self._assign(target, expression)

    def parse_line(self, line: str) -> None:
        """Translate one source line, appending its instructions."""
        if line[-1:] in ("\n", "\r"):
            line = line[:-1]
        line = line.split(";", 1)[0].strip(_WHITESPACE)
        if not line or line.startswith(_HEADERS):
            return
        if "=" in line:
            self._assignment_line(line)
            return
        tokens = [token for token in _TOKEN_SEPARATORS.split(line) if token]
        if not tokens:
            return
        operation = _KEYWORDS.get(tokens[0], tokens[0])
        argument = _leading_int(tokens[1]) if len(tokens) > 1 else 0
        self._emit((operation, argument))

    def parse(self, text: str) -> Program:
        """Translate a whole source text; the program always ends in HLT."""
        for line in _read_lines(text):
            self.parse_line(line)
        instructions = self.program.instructions
        if not instructions or instructions[-1].operation != "HLT":
            self.program.add("HLT", 0)
        return self.program


def parse_text(text: str) -> Program:
    """Compile LPN source text into a program."""
    return Compiler().parse(text)


def parse_file(path: str | Path) -> Program:
    """Compile the LPN file at ``path``; raises OSError if it cannot be read."""
    text = Path(path).read_text(encoding="utf-8", errors="surrogateescape")
    return parse_text(text)