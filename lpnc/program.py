"""Neander assembly programs and their textual form."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator

_HALT = "HLT"


@dataclass
class Instruction:
    """One assembly instruction: a mnemonic and its numeric argument."""

    operation: str
    argument: int = 0

    def to_asm(self) -> str:
        if self.operation == _HALT:
            return _HALT
        # Negative arguments print as their 32-bit two's complement.
        return f"{self.operation} {self.argument & 0xFFFFFFFF:02X}"


@dataclass
class Program:
    """An ordered sequence of instructions."""

    instructions: list[Instruction] = field(default_factory=list)

    def add(self, operation: str, argument: int = 0) -> Instruction:
        """Append an instruction and return it."""
        instruction = Instruction(operation, argument)
        self.instructions.append(instruction)
        return instruction

    def __len__(self) -> int:
        return len(self.instructions)

    def __iter__(self) -> Iterator[Instruction]:
        return iter(self.instructions)

    def to_asm(self) -> str:
        """Render the program as assembly text, one instruction per line."""
        return "".join(f"{instruction.to_asm()}\n" for instruction in self.instructions)


def write_asm(program: Program, path: str | Path) -> None:
    """Write the assembly text of ``program`` to ``path``."""
    Path(path).write_text(program.to_asm(), encoding="utf-8")