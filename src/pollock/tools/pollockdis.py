import sys
import logging as lg
from pathlib import Path

import click

import pollock.common.ops as ops
from pollock.image.decoder import ImageFormatError, open_image, read_metadata, read_program


EXIT_OK = 0
EXIT_FORMAT_ERROR = 4


def listing_line(index: int, line) -> str:
    return f'{index:6} ' + '; '.join(ops.mnemonic(op) for op in line)


@click.command()
@click.option('-v', '--verbose', is_flag=True, help='Sets logging level to debug')
@click.argument('image_filename', type=click.Path(exists=True, dir_okay=False, path_type=Path))
def disassemble(verbose: bool, image_filename: Path):
    lg.basicConfig(level=lg.DEBUG if verbose else lg.INFO)

    try:
        image = open_image(image_filename)
        meta = read_metadata(image)
        program = read_program(image)

    except ImageFormatError as e:
        lg.error(str(e))
        sys.exit(EXIT_FORMAT_ERROR)

    click.echo(f'# version {meta.major}.{meta.minor}, cell size {meta.cell_size}, {meta.length} lines')

    for index, line in enumerate(program):
        click.echo(listing_line(index, line))

    sys.exit(EXIT_OK)


if __name__ == '__main__':
    disassemble()
