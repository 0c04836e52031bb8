from pathlib import Path

import pollock.compile.asm as asm


def find_file(filename: str) -> Path:
    return Path(__file__).parent / filename


def load_file(filename: str) -> str:
    return find_file(filename).read_text()


def assemble_testdata(name: str, **params) -> asm.Program:
    settings = asm.AsmSettings().update(**params)
    return asm.assemble_string(settings, load_file(f'testdata/{name}.plk'))
