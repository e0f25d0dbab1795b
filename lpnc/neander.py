"""The Neander accumulator machine: image loading, execution and dumps."""

from __future__ import annotations

import struct
import sys
from dataclasses import dataclass
from enum import IntEnum
from pathlib import Path

HEADER = 0x52444E03
MEMORY_SIZE = 256


class Opcode(IntEnum):
    STA = 0x10
    LDA = 0x20
    ADD = 0x30
    SUB = 0x40
    NOT = 0x60
    JMP = 0x80
    JN = 0x90
    JZ = 0xA0
    HLT = 0xF0


class NeanderError(Exception):
    """Raised when an image cannot be loaded or run."""


@dataclass
class MachineState:
    """Registers, flags and memory of a halted machine."""

    ac: int
    pc: int
    negative: bool
    zero: bool
    memory: bytearray


def load_image(data: bytes) -> bytearray:
    """Decode an image: a 4-byte header, then 256 two-byte cells of which the first byte is kept."""
    if len(data) < 4:
        raise NeanderError("Erro ao ler o cabeçalho do arquivo.")
    (magic,) = struct.unpack_from("<I", data)
    if magic != HEADER:
        raise NeanderError("O arquivo fornecido não é um formato válido do Neander.")
    body = data[4 : 4 + 2 * MEMORY_SIZE]
    if len(body) < 2 * MEMORY_SIZE:
        raise NeanderError("Erro ao ler o arquivo.")
    return bytearray(body[0::2])


def run(memory: bytes | bytearray) -> MachineState:
    """Execute from address 0 until the byte at PC is HLT."""
    mem = bytearray(memory)
    if len(mem) != MEMORY_SIZE:
        raise NeanderError(f"memory must hold {MEMORY_SIZE} bytes")
    ac = pc = 0
    negative = zero = False

    while mem[pc] != Opcode.HLT:
        negative = ac >= 0x80
        zero = ac == 0
        match mem[pc]:
            case Opcode.STA:
                pc = (pc + 1) & 0xFF
                mem[mem[pc]] = ac
            case Opcode.LDA:
                pc = (pc + 1) & 0xFF
                ac = mem[mem[pc]]
            case Opcode.ADD:
                pc = (pc + 1) & 0xFF
                ac = (ac + mem[mem[pc]]) & 0xFF
            case Opcode.SUB:
                pc = (pc + 1) & 0xFF
                ac = (ac - mem[mem[pc]]) & 0xFF
            case Opcode.NOT:
                ac = ~ac & 0xFF
            case Opcode.JMP:
                pc = (pc + 1) & 0xFF
                pc = (mem[pc] - 1) & 0xFF
            case Opcode.JN:
                pc = (pc + 1) & 0xFF
                if negative:
                    pc = (mem[pc] - 1) & 0xFF
            case Opcode.JZ:
                pc = (pc + 1) & 0xFF
                if zero:
                    pc = (mem[pc] - 1) & 0xFF
        pc = (pc + 1) & 0xFF

    return MachineState(ac=ac, pc=pc, negative=negative, zero=zero, memory=mem)


def format_state(state: MachineState) -> str:
    """Render registers, flags and a hex dump of memory."""
    n_flag = "*" if state.negative else " "
    z_flag = "*" if state.zero else " "
    parts = [
        f"\nAC: {state.ac:02x} - PC: {state.pc:02x}\nflags: N({n_flag}) - Z({z_flag})\n",
        "\nMemoria final =========================================",
    ]
    for offset in range(0, MEMORY_SIZE, 16):
        row = "".join(f"{byte:02x} " for byte in state.memory[offset : offset + 16])
        parts.append(f"\n{offset:07x} {row}")
    parts.append("\n=======================================================\n")
    return "".join(parts)


def execute_file(path: str | Path) -> MachineState:
    """Load an image file and run it."""
    try:
        data = Path(path).read_bytes()
    except OSError as exc:
        raise NeanderError("Erro ao abrir arquivo.") from exc
    return run(load_image(data))


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        print("Uso: neander <arquivo.bin>")
        return 1
    try:
        state = execute_file(args[0])
    except NeanderError as exc:
        print(exc)
        return 1
    sys.stdout.write(format_state(state))
    return 0