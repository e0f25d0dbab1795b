[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lpnc"
version = "0.1.0"
description = "A toolchain for the Neander teaching machine: a small-language compiler, assembler and emulator, plus an arithmetic-to-Brainfuck compiler and interpreter"
requires-python = ">=3.10"
dependencies = []
keywords = ["neander", "compiler", "assembler", "emulator", "brainfuck", "education"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Compilers",
    "Topic :: Software Development :: Assemblers",
    "Topic :: System :: Emulators",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
lpnc-compile = "lpnc.compiler:main"
lpnc-asm = "lpnc.assembler:main"
lpnc-run = "lpnc.neander:main"
lpnc-bf-compile = "lpnc.brainfuck:compiler_main"
lpnc-bf-run = "lpnc.brainfuck:executor_main"

[tool.hatch.build.targets.wheel]
packages = ["lpnc"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
