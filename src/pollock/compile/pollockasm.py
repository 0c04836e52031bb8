import sys
import logging as lg
from pathlib import Path

import click

import pollock.compile.asm as asm
from pollock.common.imgconf import (
    VMAJOR, VMINOR, CELL_SIZE_MIN, CELL_SIZE_MAX, CELL_SIZE_DEFAULT, SOURCE_SUFFIX, IMAGE_SUFFIX
)
from pollock.compile.preprocessor import AsmSyntaxError
from pollock.image.encoder import ImageWriteError


EXIT_OK = 0
EXIT_SYNTAX_ERROR = 1
EXIT_WRITE_ERROR = 3


def log_level(settings: asm.AsmSettings) -> int:
    if settings.silent:
        return lg.ERROR

    return lg.DEBUG if settings.verbose else lg.INFO


def check_source(ctx: click.Context, param: click.Parameter, value: Path) -> Path:
    if value.suffix != SOURCE_SUFFIX:
        raise click.BadParameter(f'File must have a {SOURCE_SUFFIX} extension.')

    return value


@click.command()
@click.pass_context
@click.option(
    '-f', '--file', 'input', required=True, callback=check_source,
    type=click.Path(exists=True, dir_okay=False, path_type=Path), help='Path to the source file'
)
@click.option('-o', '--output', type=Path, help='Output image, defaults to the source with .png')
@click.option(
    '-c', '--cell-size', type=click.IntRange(CELL_SIZE_MIN, CELL_SIZE_MAX),
    default=CELL_SIZE_DEFAULT, show_default=True, help='Cell size in pixels'
)
@click.option('-d', '--dry-run', is_flag=True, help='Validate only, do not write the image')
@click.option('-b', '--byte-array', is_flag=True, help='Print the assembled opcodes as text')
@click.option('-s', '--silent', is_flag=True, help='Suppress informational logging')
@click.option('-v', '--verbose', is_flag=True, help='Sets logging level to debug')
@click.option('--resolve-labels', is_flag=True, help='Replace label pushes with cell indices')
def assemble(ctx: click.Context, input: Path, output: Path | None, **params):
    ctx.ensure_object(asm.AsmSettings)
    settings: asm.AsmSettings = ctx.obj.update(**params)

    lg.basicConfig(level=log_level(settings))
    lg.info(f'Pollock ASM {VMAJOR}.{VMINOR}')

    if not output:
        output = input.with_suffix(IMAGE_SUFFIX)
        lg.info(f'Output file not specified, using default: {output}')

    try:
        program = asm.assemble_file(settings, input, output)

    except AsmSyntaxError as e:
        lg.error(str(e))
        sys.exit(EXIT_SYNTAX_ERROR)

    except ImageWriteError as e:
        lg.error(f'Fatal error: "{e}"')
        sys.exit(EXIT_WRITE_ERROR)

    if settings.byte_array and len(program):
        click.echo(asm.format_program(program))

    sys.exit(EXIT_OK)


if __name__ == '__main__':
    assemble()
