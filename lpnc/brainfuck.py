"""Compile a one-line arithmetic assignment to Brainfuck, and run Brainfuck."""

from __future__ import annotations

import re
import sys

MEMORY_SIZE = 30000
MAX_CODE = 9999
LINE_LIMIT = 255
COMMANDS = frozenset("+-<>[].,")

_NUMBER = re.compile(r"[+-]?[0-9]+")
_WHITESPACE = " \t\n\r\v\f"
# " %c = %d %c %d %c %d": a character, a literal '=', then numbers and operators.
_PATTERN = ("c", "=", "d", "c", "d", "c", "d")


class BrainfuckError(Exception):
    """Raised for syntax errors, bad operators or invalid programs."""


def _scan(line: str) -> list | None:
    """Match ``line`` against the pattern; None if input ends before any field."""
    values: list = []
    pos = 0
    for item in _PATTERN:
        while pos < len(line) and line[pos] in _WHITESPACE:
            pos += 1
        if pos >= len(line):
            return values or None
        if item == "c":
            values.append(line[pos])
            pos += 1
        elif item == "d":
            match = _NUMBER.match(line, pos)
            if not match:
                return values
            values.append(int(match.group()))
            pos = match.end()
        elif line[pos] == item:
            pos += 1
        else:
            return values
    return values


def _apply(left: int, operator: str, right: int) -> int:
    if operator == "+":
        return left + right
    if operator == "-":
        return left - right
    if operator == "*":
        return left * right
    if operator == "/":
        if right == 0:
            return 0
        quotient = abs(left) // abs(right)
        return quotient if (left < 0) == (right < 0) else -quotient
    raise BrainfuckError(f"Operador invalido: {operator}")


def evaluate_expression(line: str) -> int:
    """Evaluate 'v = a op b' or 'v = a op b op c' strictly left to right."""
    values = _scan(line)
    if not values:
        raise BrainfuckError("Erro de sintaxe")
    if len(values) == 6:
        _, a, op1, b, op2, c = values
        return _apply(_apply(a, op1, b), op2, c)
    if len(values) < 4:
        raise BrainfuckError("Erro de sintaxe")
    _, a, op1, b = values[:4]
    return _apply(a, op1, b)


def generate(value: int) -> str:
    """Brainfuck that clears the current cell and adds ``value`` to it."""
    return "[-]" + "+" * max(value, 0)


def compile_line(line: str) -> str:
    return generate(evaluate_expression(line))


def execute(code: str, input_bytes: bytes = b"") -> tuple[bytes, bytearray]:
    """Run ``code``; return the bytes written and the final tape."""
    program = [ch for ch in code if ch in COMMANDS]
    tape = bytearray(MEMORY_SIZE)
    output = bytearray()
    feed = iter(input_bytes)
    stack: list[int] = []
    ptr = 0
    i = 0

    def cell_index() -> int:
        if not 0 <= ptr < MEMORY_SIZE:
            raise BrainfuckError(f"ponteiro fora da memoria: {ptr}")
        return ptr

    while i < len(program):
        command = program[i]
        if command == ">":
            ptr += 1
        elif command == "<":
            ptr -= 1
        elif command == "+":
            idx = cell_index()
            tape[idx] = (tape[idx] + 1) & 0xFF
        elif command == "-":
            idx = cell_index()
            tape[idx] = (tape[idx] - 1) & 0xFF
        elif command == ".":
            output.append(tape[cell_index()])
        elif command == ",":
            tape[cell_index()] = next(feed, 0xFF)
        elif command == "[":
            if tape[cell_index()] == 0:
                depth = 1
                while depth and i + 1 < len(program):
                    i += 1
                    if program[i] == "[":
                        depth += 1
                    elif program[i] == "]":
                        depth -= 1
            else:
                stack.append(i)
        elif command == "]":
            if tape[cell_index()] != 0:
                if not stack:
                    raise BrainfuckError("']' sem '[' correspondente")
                i = stack[-1]
            elif stack:
                stack.pop()
        i += 1

    return bytes(output), tape


def _read_program(data: bytes) -> tuple[str, bytes]:
    """Split stdin into code (at most MAX_CODE commands) and the remaining input."""
    code: list[str] = []
    for index, byte in enumerate(data):
        if len(code) >= MAX_CODE:
            return "".join(code), data[index + 1 :]
        char = chr(byte)
        if char in COMMANDS:
            code.append(char)
    return "".join(code), b""


def _stdin_bytes() -> bytes:
    buffer = getattr(sys.stdin, "buffer", None)
    if buffer is not None:
        return buffer.read()
    return sys.stdin.read().encode("utf-8")


def compiler_main(argv: list[str] | None = None) -> int:
    line = sys.stdin.readline()
    if not line:
        print("Erro ao ler a linha", file=sys.stderr)
        return 1
    try:
        code = compile_line(line[:LINE_LIMIT])
    except BrainfuckError as exc:
        print(exc, file=sys.stderr)
        return 1
    sys.stdout.write(code)
    return 0


def executor_main(argv: list[str] | None = None) -> int:
    code, remaining = _read_program(_stdin_bytes())
    try:
        output, tape = execute(code, remaining)
    except BrainfuckError as exc:
        print(exc, file=sys.stderr)
        return 1
    buffer = getattr(sys.stdout, "buffer", None)
    sys.stdout.flush()
    if buffer is not None:
        buffer.write(output)
        buffer.flush()
    else:
        sys.stdout.write(output.decode("latin-1"))
    print(f"\n[SAIDA NUMERICA FINAL] memory[0] = {tape[0]}")
    return 0