''' Source line preprocessing '''

import logging as lg
from typing import List

import pyparsing as pp

import pollock.common.ops as ops
import pollock.compile.grammar as g
from pollock.common.imgconf import CHANNELS
from pollock.compile.program import ProgramLine
from pollock.compile.tokenizer import TokenError, LabelResolver, encode

CR = '\r'
LABEL_MAX_LEN = 7


class AsmSyntaxError(Exception):
    lineno: int

    def __init__(self, message: str, lineno: int):
        super().__init__(f'Syntax error. {message} in line: {lineno}.')
        self.lineno = lineno


class MultipleLabelsError(AsmSyntaxError):
    def __init__(self, lineno: int):
        super().__init__('Multiple labels detected', lineno)


class EmptyLabelError(AsmSyntaxError):
    def __init__(self, lineno: int):
        super().__init__('Empty label detected', lineno)


class InvalidLabelError(AsmSyntaxError):
    label: str

    def __init__(self, label: str, lineno: int):
        super().__init__(f'Invalid label detected: "{label}"', lineno)
        self.label = label


class SourceLine:
    lineno: int
    label: str | None
    slots: List[str]

    def __init__(self, lineno: int, slots: List[str], label: str | None = None):
        self.lineno = lineno
        self.slots = slots
        self.label = label


def channel(index: int) -> str:
    return CHANNELS[index]


def check_label(tokens: pp.ParseResults, lineno: int) -> str:
    label = g.squeeze(tokens)

    if not label:
        raise EmptyLabelError(lineno)

    if len(label) > LABEL_MAX_LEN or not g.matches(g.label_ref, label):
        raise InvalidLabelError(label, lineno)

    lg.info(f'Label detected: {label} in line: {lineno}.')
    return label


def parse_statement(line: str, lineno: int):
    try:
        result = g.statement.parse_string(line, parse_all=True)
    except pp.ParseException:
        # Anything but ':' is consumed by a slot or the comment
        raise MultipleLabelsError(lineno)

    label = check_label(result.label, lineno) if 'label' in result else None
    slots = [g.squeeze(slot) for slot in result.slots]

    # Bare trailing separator
    if len(slots) > 1 and not slots[-1]:
        slots.pop()

    return label, slots


def preprocess(line: str, lineno: int) -> SourceLine | None:
    if line.startswith(CR) or g.matches(g.blank, line):
        lg.debug(f'Empty or comment line at line: {lineno}. Skipping.')
        return None

    label, slots = parse_statement(line, lineno)

    for extra in slots[len(CHANNELS):]:
        if extra:
            lg.warning(f'Dropped extra text "{extra}" in line: {lineno}.')

    return SourceLine(lineno, slots[:len(CHANNELS)], label)


def report(error: TokenError, instr: str, lineno: int, index: int):
    position = f'in line: {lineno}, position: {channel(index)}'

    if error == TokenError.UNKNOWN_INSTRUCTION:
        lg.warning(f'Unknown instruction "{instr}" {position}. Replacing with nop.')
    elif error == TokenError.PUSH_MISSING_ARGUMENT:
        lg.warning(f'Push operation without argument {position}. Using zero as a value.')
    elif error == TokenError.PUSH_ARGUMENT_OUT_OF_RANGE:
        lg.warning(f'Push operation argument is out of range {position}. Using zero as a value.')
    elif error == TokenError.PUSH_ARGUMENT_INVALID:
        lg.warning(f'Push operation argument is invalid {position}. Using zero as a value.')


def assemble_line(source: SourceLine, resolver: LabelResolver | None = None) -> ProgramLine:
    lineno = source.lineno
    tokens = [ops.NOP] * len(CHANNELS)

    for index, instr in enumerate(source.slots):
        if not instr:
            lg.warning(f'Empty instruction in line: {lineno}, position: {channel(index)}. Using nop.')
            continue

        token, error = encode(instr, resolver)

        if error is not None:
            report(error, instr, lineno, index)

        tokens[index] = token

    for index in range(len(source.slots), len(CHANNELS)):
        lg.warning(f'Missing instruction in line: {lineno}, position: {channel(index)}. Using nop.')

    return ProgramLine(*tokens)
