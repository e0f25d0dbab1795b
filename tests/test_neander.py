import struct

import pytest

from lpnc.neander import (
    HEADER,
    MEMORY_SIZE,
    MachineState,
    NeanderError,
    Opcode,
    execute_file,
    format_state,
    load_image,
    main,
    run,
)


def _memory(cells):
    memory = bytearray(MEMORY_SIZE)
    for address, value in cells.items():
        memory[address] = value
    return memory


def _image(memory):
    body = b"".join(bytes([value, 0]) for value in memory)
    return struct.pack("<I", HEADER) + body


ADD_PROGRAM = {
    0: Opcode.LDA, 1: 0x80,
    2: Opcode.ADD, 3: 0x81,
    4: Opcode.STA, 5: 0x82,
    6: Opcode.HLT,
    0x80: 2, 0x81: 3,
}


def test_raw_opcode_bytes_execute():
    # LDA 0x80, STA 0x81, HLT written as plain byte values
    state = run(_memory({0: 0x20, 1: 0x80, 2: 0x10, 3: 0x81, 4: 0xF0, 0x80: 9}))
    assert state.ac == 9
    assert state.memory[0x81] == 9
    assert state.pc == 4


def test_raw_jz_byte_jumps():
    state = run(_memory({0: 0xA0, 1: 4, 2: 0x20, 3: 0x80, 4: 0xF0, 0x80: 7}))
    assert state.ac == 0
    assert state.pc == 4


def test_header_bytes_on_disk_are_accepted():
    memory = _memory(ADD_PROGRAM)
    body = b"".join(bytes([value, 0]) for value in memory)
    assert load_image(b"\x03NDR" + body) == memory


def test_reversed_header_bytes_rejected():
    with pytest.raises(NeanderError, match="formato"):
        load_image(b"RDN\x03" + bytes(512))


def test_load_image_keeps_first_byte_of_each_cell():
    memory = _memory(ADD_PROGRAM)
    assert load_image(_image(memory)) == memory


def test_load_image_rejects_bad_header():
    with pytest.raises(NeanderError, match="formato"):
        load_image(b"ABCD" + bytes(512))


def test_load_image_rejects_short_header():
    with pytest.raises(NeanderError, match="cabeçalho"):
        load_image(b"\x03N")


def test_load_image_rejects_truncated_body():
    with pytest.raises(NeanderError):
        load_image(struct.pack("<I", HEADER) + bytes(100))


def test_run_adds_and_stores():
    state = run(_memory(ADD_PROGRAM))
    assert state.ac == 5
    assert state.memory[0x82] == state.ac
    assert state.pc == 6


def test_run_does_not_modify_input():
    memory = _memory(ADD_PROGRAM)
    run(memory)
    assert memory == _memory(ADD_PROGRAM)


def test_flags_reflect_accumulator_before_last_instruction():
    state = run(_memory({0: Opcode.NOT, 1: Opcode.HLT}))
    assert state.ac == 0xFF
    assert state.zero is True
    assert state.negative is False


def test_jz_taken_when_accumulator_zero():
    state = run(_memory({0: Opcode.JZ, 1: 4, 2: Opcode.LDA, 3: 0x80, 4: Opcode.HLT, 0x80: 7}))
    assert state.ac == 0
    assert state.pc == 4


def test_jn_not_taken_when_accumulator_positive():
    state = run(_memory({0: Opcode.JN, 1: 4, 2: Opcode.LDA, 3: 0x80, 4: Opcode.HLT, 0x80: 7}))
    assert state.ac == 7


def test_jmp_skips_instructions():
    state = run(_memory({0: Opcode.JMP, 1: 4, 2: Opcode.LDA, 3: 0x80, 4: Opcode.HLT, 0x80: 9}))
    assert state.ac == 0
    assert state.pc == 4


def test_run_rejects_wrong_memory_size():
    with pytest.raises(NeanderError):
        run(bytes(10))


def test_format_state_layout():
    state = MachineState(ac=0x12, pc=0x34, negative=True, zero=False, memory=bytearray(MEMORY_SIZE))
    text = format_state(state)
    assert text.startswith("\nAC: 12 - PC: 34\nflags: N(*) - Z( )\n")
    assert "\nMemoria final =========================================" in text
    assert "\n0000000 " in text
    assert "\n00000f0 " in text
    assert text.endswith("\n=======================================================\n")
    assert text.count("00 ") >= MEMORY_SIZE


def test_execute_file_missing(tmp_path):
    with pytest.raises(NeanderError, match="abrir"):
        execute_file(tmp_path / "missing.bin")


def test_execute_file_runs_image(tmp_path):
    target = tmp_path / "prog.bin"
    target.write_bytes(_image(_memory(ADD_PROGRAM)))
    assert execute_file(target).memory[0x82] == run(_memory(ADD_PROGRAM)).ac


def test_main_without_arguments():
    assert main([]) == 1


def test_main_prints_state(tmp_path, capsys):
    target = tmp_path / "prog.bin"
    target.write_bytes(_image(_memory(ADD_PROGRAM)))
    assert main([str(target)]) == 0
    assert "Memoria final" in capsys.readouterr().out