"""Command that compiles an LPN file into a Neander assembly file."""

from __future__ import annotations

import sys

from lpnc.parser import parse_file
from lpnc.program import write_asm


def output_path(path: str) -> str:
    """Replace everything from the last dot with '.asm', or append it."""
    dot = path.rfind(".")
    return (path[:dot] if dot >= 0 else path) + ".asm"


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        print("Uso: compilador <arquivo.lpn>", file=sys.stderr)
        return 1
    source = args[0]
    try:
        program = parse_file(source)
    except OSError:
        print(f"Erro ao analisar o arquivo {source}", file=sys.stderr)
        return 1
    target = output_path(source)
    try:
        write_asm(program, target)
    except OSError as exc:
        print(f"Erro ao criar o arquivo {target}: {exc.strerror}", file=sys.stderr)
        return 1
    print(f"Arquivo {target} gerado com sucesso.")
    return 0