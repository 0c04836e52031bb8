import logging as lg
from pathlib import Path
from typing import List

from pollock.common.imgconf import CELL_SIZE_DEFAULT
from pollock.compile.program import Program
from pollock.compile.preprocessor import SourceLine, preprocess, assemble_line
from pollock.image.encoder import encode_program, write_image


class AsmSettings:
    cell_size: int
    dry_run: bool
    silent: bool
    byte_array: bool
    verbose: bool
    resolve_labels: bool

    def __init__(self):
        self.cell_size = CELL_SIZE_DEFAULT
        self.dry_run = False
        self.silent = False
        self.byte_array = False
        self.verbose = False
        self.resolve_labels = False

    def update(
        self,
        cell_size: int | None = None,
        dry_run: bool | None = None,
        silent: bool | None = None,
        byte_array: bool | None = None,
        verbose: bool | None = None,
        resolve_labels: bool | None = None
    ):
        if cell_size is not None:
            self.cell_size = cell_size

        if dry_run is not None:
            self.dry_run = dry_run

        if silent is not None:
            self.silent = silent

        if byte_array is not None:
            self.byte_array = byte_array

        if verbose is not None:
            self.verbose = verbose

        if resolve_labels is not None:
            self.resolve_labels = resolve_labels

        return self


def assemble_string(settings: AsmSettings, contents: str) -> Program:
    program = Program()
    sources: List[SourceLine] = []

    # First pass
    for lineno, line in enumerate(contents.split('\n'), start=1):
        source = preprocess(line, lineno)

        if source is None:
            continue

        if source.label is not None:
            program.declare_label(source.label, len(sources))

        sources.append(source)

    # Second pass
    resolver = program.address_of if settings.resolve_labels else None

    for source in sources:
        program.append(assemble_line(source, resolver))

    lg.info(f'Program array filled with {len(program)} instructions.')
    return program


def format_program(program: Program) -> str:
    return '\n'.join(
        f'Line: {i} R: {line.r} G: {line.g} B: {line.b}'
        for i, line in enumerate(program, start=1)
    )


def assemble_file(settings: AsmSettings, input: Path, output: Path) -> Program:
    lg.info(f'Reading file: {input}')
    program = assemble_string(settings, input.read_text(encoding='utf-8', errors='replace'))

    if settings.dry_run:
        lg.info('Dry run, no image written')
        return program

    image = encode_program(program, settings.cell_size)
    write_image(image, output)
    return program
