import math
from typing import Tuple

from pollock.common.imgconf import META_CELLS


def layout(n: int) -> Tuple[int, int]:
    ''' Grid size in cells for a program of n lines '''
    if n < 0:
        raise ValueError(f'Negative program length {n}')

    cells = n + META_CELLS
    width = math.isqrt(cells)

    if width * width == cells:
        return width, width

    return width, math.ceil(cells / width)


def cell_position(index: int, width: int) -> Tuple[int, int]:
    ''' Row-major (column, row) of the index-th cell '''
    return index % width, index // width
