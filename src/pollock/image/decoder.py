''' Cell grid back to program '''

from pathlib import Path
from typing import NamedTuple

from PIL import Image

from pollock.common.imgconf import VMAJOR, CELL_SIZE_MIN, CELL_SIZE_MAX, META_CELLS
from pollock.compile.program import Program, ProgramLine
from pollock.image.layout import cell_position


class ImageFormatError(Exception):
    pass


class Metadata(NamedTuple):
    major: int
    minor: int
    cell_size: int
    length: int


def read_cell(image: Image.Image, index: int, cell_size: int):
    columns = image.width // cell_size

    if columns == 0:
        raise ImageFormatError(f'Image is narrower than a cell of {cell_size}')

    x, y = cell_position(index, columns)

    if (y + 1) * cell_size > image.height:
        raise ImageFormatError(f'Cell {index} is outside of the image')

    # Any pixel of a cell carries its color
    r, g, b, *_ = image.getpixel((x * cell_size, y * cell_size))
    return r, g, b


def read_metadata(image: Image.Image) -> Metadata:
    major, minor, cell_size = image.getpixel((0, 0))[:3]

    if major != VMAJOR:
        raise ImageFormatError(f'Unsupported format version {major}.{minor}')

    if not CELL_SIZE_MIN <= cell_size <= CELL_SIZE_MAX:
        raise ImageFormatError(f'Invalid cell size {cell_size}')

    high, middle, low = read_cell(image, 1, cell_size)
    length = (high << 16) | (middle << 8) | low
    return Metadata(major, minor, cell_size, length)


def read_program(image: Image.Image) -> Program:
    meta = read_metadata(image)
    program = Program()

    for index in range(meta.length):
        program.append(ProgramLine(*read_cell(image, META_CELLS + index, meta.cell_size)))

    return program


def open_image(path: Path) -> Image.Image:
    try:
        with Image.open(path) as image:
            return image.convert('RGBA')
    except OSError as e:
        raise ImageFormatError(f'Unable to read {path}: {e}') from e
