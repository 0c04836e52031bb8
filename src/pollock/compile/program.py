import logging as lg
from typing import Dict, List, NamedTuple

import pollock.common.ops as ops
from pollock.common.imgconf import META_CELLS


class ProgramLine(NamedTuple):
    r: int = ops.NOP
    g: int = ops.NOP
    b: int = ops.NOP


class Program:
    ''' Assembled lines plus the label table '''
    lines: List[ProgramLine]
    labels: Dict[str, int]

    def __init__(self):
        self.lines = list()
        self.labels = dict()

    def __len__(self):
        return len(self.lines)

    def __iter__(self):
        return iter(self.lines)

    def __getitem__(self, index: int) -> ProgramLine:
        return self.lines[index]

    def append(self, line: ProgramLine):
        lg.debug(f'Line {len(self.lines)}: ' + ' '.join(f'0x{op:02X}' for op in line))
        self.lines.append(line)

    def declare_label(self, name: str, index: int):
        if name in self.labels:
            lg.warning(f'Duplicate label {name}, keeping cell {self.labels[name]}')
            return

        address = META_CELLS + index
        lg.debug(f'Label {name} @ cell {address}')
        self.labels[name] = address

    def address_of(self, name: str) -> int | None:
        return self.labels.get(name)
