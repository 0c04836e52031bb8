''' Program to cell grid '''

import logging as lg
from pathlib import Path
from typing import Iterator, Tuple

from PIL import Image

from pollock.common.imgconf import VMAJOR, VMINOR, OPAQUE, MAX_PROGRAM_LENGTH
from pollock.compile.program import Program
from pollock.image.layout import layout, cell_position

Color = Tuple[int, int, int]


class ImageWriteError(Exception):
    pass


def version_cell(major: int, minor: int, cell_size: int) -> Color:
    return (major, minor, cell_size)


def length_cell(length: int) -> Color:
    return ((length >> 16) & 0xFF, (length >> 8) & 0xFF, length & 0xFF)


def cells(major: int, minor: int, cell_size: int, program: Program) -> Iterator[Color]:
    yield version_cell(major, minor, cell_size)
    yield length_cell(len(program))

    for line in program:
        yield tuple(line)


def fill_cell(image: Image.Image, x: int, y: int, cell_size: int, color: Color):
    box = (x * cell_size, y * cell_size, (x + 1) * cell_size, (y + 1) * cell_size)
    image.paste(color + (OPAQUE,), box)


def encode_grid(
    width: int,
    height: int,
    cell_size: int,
    major: int,
    minor: int,
    program: Program
) -> Image.Image:
    if len(program) > MAX_PROGRAM_LENGTH:
        raise ImageWriteError(f'Program of {len(program)} lines does not fit the length cell')

    image = Image.new('RGBA', (width * cell_size, height * cell_size))

    for index, color in enumerate(cells(major, minor, cell_size, program)):
        x, y = cell_position(index, width)
        fill_cell(image, x, y, cell_size, color)

    return image


def encode_program(program: Program, cell_size: int) -> Image.Image:
    width, height = layout(len(program))
    lg.info(f'X size: {width}, Y size: {height}')
    return encode_grid(width, height, cell_size, VMAJOR, VMINOR, program)


def write_image(image: Image.Image, output: Path):
    lg.info(f'Creating img file: {output}')
    created = False

    try:
        output.parent.mkdir(parents=True, exist_ok=True)

        with output.open('wb') as f:
            created = True
            image.save(f, format='PNG')

    except (OSError, ValueError) as e:
        if created:
            output.unlink(missing_ok=True)

        raise ImageWriteError(f'Unable to write {output}: {e}') from e
