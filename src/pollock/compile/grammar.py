# type: ignore
''' Basic grammar '''

import pyparsing as pp

import pollock.common.ops as ops


def g_cmd(literal, op):
    return pp.Literal(literal).setParseAction(lambda _: op)


def exact(expr):
    # No surrounding whitespace allowed
    return (expr + pp.StringEnd()).leave_whitespace()


def matches(expr, text: str) -> bool:
    return expr.matches(text, parse_all=True)


def squeeze(tokens) -> str:
    return ''.join(''.join(tokens).split())


upper = pp.srange('[A-Z]')

# LOOP, A1, DATA_2
label_suffix = pp.Literal('_') + pp.Char('1234')
label_id = pp.Combine(
    pp.Char(upper) + pp.Optional(pp.Word(upper + pp.nums, max=6)) + pp.Optional(label_suffix)
)
label_ref = exact(label_id)

us_dec_const = pp.Word(pp.nums).setParseAction(lambda r: int(r[0]))
push_arg = exact(us_dec_const)

PUSH = 'push'
pusha_cmd = exact(g_cmd('pusha', ops.PUSHA))

asm_cmd = exact(pp.Or([g_cmd(name, op) for name, op in ops.MNEMONICS.items()]))

# Source line: [LABEL:] slot [; slot ...] [# comment]
comment = pp.Suppress(pp.Literal('#') + pp.rest_of_line)
blank = pp.Optional(comment)

label_decl = pp.Group(pp.Optional(pp.CharsNotIn(':#')) + pp.Suppress(':'))('label')
slot = pp.Group(pp.Optional(pp.CharsNotIn(';:#')))
slots = pp.Group(slot + pp.ZeroOrMore(pp.Suppress(';') + slot))('slots')

statement = pp.Optional(label_decl) + slots + pp.Optional(comment)
