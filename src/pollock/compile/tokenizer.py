''' Instruction slot to opcode '''

import logging as lg
from enum import Enum
from typing import Callable, Optional, Tuple

import pyparsing as pp

import pollock.common.ops as ops
import pollock.compile.grammar as g


class TokenError(Enum):
    UNKNOWN_INSTRUCTION = 'Unknown operation'
    PUSH_MISSING_ARGUMENT = 'Push operation without argument'
    PUSH_ARGUMENT_OUT_OF_RANGE = 'Push operation argument out of range'
    PUSH_ARGUMENT_INVALID = 'Push operation argument invalid'


Token = Tuple[int, Optional[TokenError]]

# Label name -> cell index, None when the label is not declared
LabelResolver = Callable[[str], Optional[int]]


def immediate(value: int) -> Token:
    if value > ops.PUSH_MAX:
        return ops.PUSH_MIN, TokenError.PUSH_ARGUMENT_OUT_OF_RANGE

    return value, None


def encode_push(arg: str, resolver: LabelResolver | None = None) -> Token:
    if not arg:
        return ops.PUSH_MIN, TokenError.PUSH_MISSING_ARGUMENT

    if g.matches(g.label_ref, arg):
        lg.info(f'Label argument detected: {arg}')

        if resolver is not None:
            address = resolver(arg)

            if address is not None:
                lg.debug(f'Label {arg} resolved to {address}')
                return immediate(address)

        return ops.NOP, TokenError.UNKNOWN_INSTRUCTION

    if g.matches(g.push_arg, arg):
        return immediate(int(arg))

    return ops.PUSH_MIN, TokenError.PUSH_ARGUMENT_INVALID


def encode(instr: str, resolver: LabelResolver | None = None) -> Token:
    if g.matches(g.pusha_cmd, instr):
        return ops.PUSHA, None

    if instr.startswith(g.PUSH):
        return encode_push(instr[len(g.PUSH):], resolver)

    try:
        return g.asm_cmd.parse_string(instr, parse_all=True)[0], None
    except pp.ParseException:
        return ops.NOP, TokenError.UNKNOWN_INSTRUCTION
