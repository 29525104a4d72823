NOP = 0x00  # nothing
LDI = 0x01  # U16 -> R1
ADD = 0x02  # R1 + R2 -> R3
SUB = 0x03  # R1 - R2 -> R3
CMP = 0x04  # R1 - U16 -> flag
JMP = 0x05  # A5 -> PC
JEQ = 0x06  # if flag .eq EQ goto A5
JGT = 0x07  # if flag .eq GT goto A5
JLT = 0x08  # if flag .eq LT goto A5
STO = 0x09  # R1 -> M[A6]
LOD = 0x0A  # M[A6] -> R1
HLT = 0x0F  # stop

MNEMONICS = {
    'nop': NOP,
    'ldi': LDI,
    'add': ADD,
    'sub': SUB,
    'cmp': CMP,
    'jmp': JMP,
    'jeq': JEQ,
    'jgt': JGT,
    'jlt': JLT,
    'sto': STO,
    'lod': LOD,
    'hlt': HLT
}

NAMES = {op: name for name, op in MNEMONICS.items()}

LONG_NAMES = {
    NOP: 'NO-OP',
    LDI: 'LOAD IMMEDIATE',
    ADD: 'ADD',
    SUB: 'SUBTRACT',
    CMP: 'COMPARE',
    JMP: 'JUMP',
    JEQ: 'JUMP IF EQUAL',
    JGT: 'JUMP IF GREATER THAN',
    JLT: 'JUMP IF LESS THAN',
    STO: 'STORE',
    LOD: 'LOAD',
    HLT: 'HALT'
}

# Raw data word, not an opcode
DW = 'dw'
