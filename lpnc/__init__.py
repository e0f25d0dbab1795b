"""LPN compiler, Neander assembler and emulator, and an arithmetic-to-Brainfuck compiler and interpreter."""

__version__ = "0.1.0"