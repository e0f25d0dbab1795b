import pytest

from lpnc.assembler import assemble
from lpnc.compiler import main, output_path
from lpnc.neander import Opcode


@pytest.mark.parametrize(
    "source, expected",
    [
        ("programa.lpn", "programa.asm"),
        ("dir/prog", "dir/prog.asm"),
        ("a.b.c", "a.b.asm"),
    ],
)
def test_output_path(source, expected):
    assert output_path(source) == expected


def test_main_writes_assembly(tmp_path, capsys):
    source = tmp_path / "programa.lpn"
    source.write_text("x = 5\n", encoding="utf-8")
    assert main([str(source)]) == 0
    target = tmp_path / "programa.asm"
    assert target.read_text(encoding="utf-8") == "LDA 05\nSTA 80\nHLT\n"
    assert f"Arquivo {target} gerado com sucesso." in capsys.readouterr().out


@pytest.mark.parametrize("argv", [[], ["a.lpn", "b.lpn"]])
def test_main_usage(argv, capsys):
    assert main(argv) == 1
    assert "Uso" in capsys.readouterr().err


def test_main_missing_file(tmp_path, capsys):
    missing = tmp_path / "ausente.lpn"
    assert main([str(missing)]) == 1
    assert f"Erro ao analisar o arquivo {missing}" in capsys.readouterr().err
    assert not (tmp_path / "ausente.asm").exists()