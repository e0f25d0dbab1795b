"""Two-pass assembler from Neander assembly text to a memory image."""

from __future__ import annotations

import re
import string
import struct
import sys
from pathlib import Path

from lpnc.neander import HEADER, MEMORY_SIZE, Opcode

_HEX = re.compile(r"0[xX]([0-9a-fA-F]+)|([0-9a-fA-F]+)")


class AssemblerError(Exception):
    """Raised for unknown instructions or labels."""


def _split_statement(text: str) -> tuple[str, str]:
    tokens = text.split()
    mnemonic = tokens[0] if tokens else ""
    argument = tokens[1] if len(tokens) > 1 else ""
    return mnemonic, argument


def parse_source(text: str) -> tuple[dict[str, int], list[tuple[str, str]]]:
    """First pass: collect label addresses and (mnemonic, argument) statements.

    A line without a colon and without a space is taken as a bare label.
    """
    labels: dict[str, int] = {}
    statements: list[tuple[str, str]] = []
    for raw in text.splitlines():
        line = raw.split(";", 1)[0].strip()
        if not line:
            continue
        address = 2 * len(statements)
        label, _, rest = line.partition(":")
        if rest:
            labels.setdefault(label, address)
            statements.append(_split_statement(rest))
        elif " " in label:
            statements.append(_split_statement(label))
        else:
            labels.setdefault(label, address)
    return labels, statements


def _parse_hex(argument: str) -> int:
    match = _HEX.match(argument)
    digits = match.group(1) or match.group(2)
    return int(digits, 16)


def _resolve(argument: str, labels: dict[str, int]) -> int:
    if argument and argument[0] in string.hexdigits:
        return _parse_hex(argument)
    try:
        return labels[argument]
    except KeyError:
        raise AssemblerError(f"Erro: rotulo não encontrado: {argument}") from None


def assemble(text: str) -> bytearray:
    """Assemble source text into 256 bytes of memory."""
    labels, statements = parse_source(text)
    if 2 * len(statements) > MEMORY_SIZE:
        raise AssemblerError("Erro: programa excede a memoria")
    memory = bytearray(MEMORY_SIZE)
    for index, (mnemonic, argument) in enumerate(statements):
        try:
            opcode = Opcode[mnemonic]
        except KeyError:
            raise AssemblerError(f"Instrucao desconhecida: {mnemonic}") from None
        address = 2 * index
        memory[address] = opcode
        if opcode != Opcode.HLT:
            memory[address + 1] = _resolve(argument, labels) & 0xFF
    return memory


def encode_image(memory: bytes | bytearray) -> bytes:
    """Write the header, then each address followed by its byte."""
    if len(memory) != MEMORY_SIZE:
        raise ValueError(f"memory must hold {MEMORY_SIZE} bytes")
    body = b"".join(bytes([address, value]) for address, value in enumerate(memory))
    return struct.pack("<I", HEADER) + body


def output_path(path: str) -> str:
    """Replace everything from the last dot with '.bin', or append it."""
    dot = path.rfind(".")
    return (path[:dot] if dot >= 0 else path) + ".bin"


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        print("Uso: assembler arquivo.asm")
        return 1
    source = args[0]
    try:
        text = Path(source).read_text(encoding="utf-8", errors="surrogateescape")
    except OSError as exc:
        print(f"Erro ao abrir arquivo: {exc.strerror}", file=sys.stderr)
        return 1
    try:
        memory = assemble(text)
    except AssemblerError as exc:
        print(exc, file=sys.stderr)
        return 1
    target = output_path(source)
    try:
        Path(target).write_bytes(encode_image(memory))
    except OSError as exc:
        print(f"Erro ao criar arquivo de saída: {exc.strerror}", file=sys.stderr)
        return 1
    print(f"Arquivo binário gerado com sucesso: {target}")
    return 0