# Immediate push
PUSH_MIN = 0x00
PUSH_MAX = 0x7F  # push U7

# Arithmetic
ADD = 0x80  # a + b
SUB = 0x84  # a - b
MUL = 0x88  # a * b
DIV = 0x8C  # a // b
REM = 0x90  # a % b

# Stack
POP = 0x94  # drop top
SWAP = 0x98  # a b -> b a
DUP = 0x9C  # a -> a a
ROT = 0xA0

# Logic and comparison
NOT = 0xA4
OR = 0xA8
AND = 0xAC
GT = 0xB0
EQ = 0xB4
LT = 0xB8

# Control flow
NOP = 0xBC
HALT = 0xC0
JMPZ = 0xC4
JMPNZ = 0xC8

# I/O
OUTC = 0xCC  # print a as char
INC = 0xD0  # read char
OUTI = 0xD4  # print a as int
INI = 0xD8  # read int

# Extended
PUSHA = 0xDC  # push accumulator/address
WAITA = 0xE0
NEG = 0xE4
SHL = 0xE8
SHR = 0xEC

MNEMONICS = {
    'add': ADD,
    'sub': SUB,
    'mul': MUL,
    'div': DIV,
    'rem': REM,
    'pop': POP,
    'swap': SWAP,
    'dup': DUP,
    'rot': ROT,
    'not': NOT,
    'or': OR,
    'and': AND,
    'gt': GT,
    'eq': EQ,
    'lt': LT,
    'nop': NOP,
    'halt': HALT,
    'jmpz': JMPZ,
    'jmpnz': JMPNZ,
    'outc': OUTC,
    'inc': INC,
    'outi': OUTI,
    'ini': INI,
    'waita': WAITA,
    'neg': NEG,
    'shl': SHL,
    'shr': SHR,
}


def is_push(op: int) -> bool:
    return PUSH_MIN <= op <= PUSH_MAX


def mnemonic(op: int) -> str:
    ''' Reverse lookup, used for listings '''
    if is_push(op):
        return f'push{op}'

    if op == PUSHA:
        return 'pusha'

    for name, value in MNEMONICS.items():
        if value == op:
            return name

    return f'0x{op:02X}'
