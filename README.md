# lpnc

A small toolchain for the Neander teaching computer, an 8-bit accumulator
machine with 256 bytes of memory, and a separate arithmetic-to-Brainfuck
pipeline.

## Neander tools

1. **Compile** a program in the small LPN language to Neander assembly:

   ```
   lpnc-compile programa.lpn      # writes programa.asm
   ```

2. **Assemble** assembly text into a Neander image:

   ```
   lpnc-asm programa.asm          # writes programa.bin
   ```

3. **Run** an image on the emulator:

   ```
   lpnc-run programa.bin
   ```

   The emulator starts at address 0 and runs until the byte at PC is `HLT`
   (`0xF0`), then prints the accumulator, the program counter, the N and Z
   flags and a hex dump of the 256 memory cells.

Each command prints a usage line and exits with status 1 when called with
the wrong arguments, and reports unreadable files and compile errors on
the console.

### The LPN language

Text after `;` on a line is a comment, and blank lines are skipped. Lines
starting with `PROGRAMA`, `INICIO` or `FIM` are ignored.

A line containing `=` is an assignment. The right-hand side may be a single
number or variable, or an expression with `+`, `-`, `*`, `/` and
parentheses, evaluated with the usual precedence. Variables get memory
cells from address 128 upwards; temporaries for intermediate results start
at address 200. Multiplication and division are expanded into loops of
additions and subtractions. Numbers in expressions are emitted as the
instruction argument as they are.

Any other line is a single instruction: one of the words `carrega`,
`adiciona`, `subtrai`, `armazena`, `para` (translated to `LDA`, `ADD`,
`SUB`, `STA`, `HLT`), or any other word taken as the mnemonic, followed by a
decimal argument (0 when missing). A final `HLT` is added if the program
does not end with one. A program holds at most 256 instructions; further
instructions are dropped.

```
PROGRAMA "exemplo"
INICIO
x = 3
y = (x + 2) * 4   ; expression with precedence
FIM
```

Arguments are written to the assembly file as uppercase hexadecimal, and
`HLT` is written without an argument.

### Assembly

The assembler accepts `STA`, `LDA`, `ADD`, `SUB`, `NOT`, `JMP`, `JN`, `JZ`
and `HLT`, each taking two bytes of memory. Arguments are hexadecimal
numbers (an optional `0x` prefix is allowed) or labels. A label is written
as `name:` in front of an instruction, or as a single word on its own line.
A line holding one word and no colon is always read as a label, so a bare
`HLT` line defines a label rather than a halt; write `HLT 00` to assemble
the instruction. Unknown instructions, undefined labels and programs larger
than 256 bytes are errors.

### Image format

An image starts with the 4-byte header `03 4E 44 52`, followed by 256 pairs
of bytes. `lpnc-asm` writes each pair as the cell address followed by the
cell value. `lpnc-run` keeps the **first** byte of each pair as the memory
cell, so an image written by `lpnc-asm` loads as the addresses 0 to 255
rather than the assembled program.

## Arithmetic-to-Brainfuck pipeline

`lpnc-bf-compile` reads one line such as `a = 4 / 2 * 3` from standard input
(one or two binary operators on integers, evaluated strictly left to right,
with division truncating toward zero and division by zero giving 0) and
prints Brainfuck code that clears the current cell and adds the result to
it; a negative result gives a cleared cell.

`lpnc-bf-run` reads Brainfuck code from standard input (at most 9999
commands; any other characters are skipped), runs it on a 30000-cell tape
of 8-bit cells, writes whatever the program outputs, and finally prints the
value of the first cell. Bytes after the code feed `,`; at the end of input
`,` stores 255. Moving the pointer off the tape before using a cell, or an
unmatched `]`, is an error.

```
echo "a = 4 / 2 * 3" | lpnc-bf-compile | lpnc-bf-run
```

prints

```
[SAIDA NUMERICA FINAL] memory[0] = 6
```

## Library use

- `lpnc.parser`: `parse_text(text)` and `parse_file(path)` return a
  `lpnc.program.Program`; `Compiler` exposes `parse_line` and `parse` and
  keeps the variable table in `variables`.
- `lpnc.program`: `Program` (with `add` and `to_asm`), `Instruction` and
  `write_asm(program, path)`.
- `lpnc.assembler`: `parse_source`, `assemble(text)` returning 256 bytes,
  `encode_image(memory)` and `output_path(path)`; errors raise
  `AssemblerError`.
- `lpnc.neander`: `load_image(data)`, `run(memory)` returning a
  `MachineState`, `format_state(state)` and `execute_file(path)`; errors
  raise `NeanderError`. `Opcode` lists the instruction codes.
- `lpnc.brainfuck`: `evaluate_expression(line)`, `generate(value)`,
  `compile_line(line)` and `execute(code, input_bytes)` returning the output
  bytes and the final tape; errors raise `BrainfuckError`.

## What it does not do

There is no linker, debugger or step-by-step tracing, and the LPN language
has no jumps, conditions or input/output: programs are straight-line
assignments and single instructions. As noted above, images written by
`lpnc-asm` are not loaded back by `lpnc-run` as the assembled program.

## Installing and testing

```
pip install .
pip install ".[test]"
pytest
```