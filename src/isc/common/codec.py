''' Instruction word layout '''

from typing import NamedTuple, Sequence, Tuple

import isc.common.ops as ops
from isc.common.hwconf import OPCODE_SHIFT, OPCODE_BITS, OPERAND_MASK, WORD_MASK


# Field kinds
REG = 'reg'     # register index, written as r<n>
IMM = 'imm'     # immediate value
ADDR = 'addr'   # memory address, a number or a label


class Field(NamedTuple):
    name: str
    width: int
    kind: str

    @property
    def limit(self) -> int:
        return 1 << self.width


TARGET = (Field('target', 5, ADDR),)


# Operand fields, most significant first. The last field sits at bit 0.
LAYOUTS: dict[int, Tuple[Field, ...]] = {
    ops.NOP: (),
    ops.LDI: (Field('value', 16, IMM), Field('dst', 2, REG)),
    ops.ADD: (Field('a', 2, REG), Field('b', 2, REG), Field('c', 2, REG)),
    ops.SUB: (Field('a', 2, REG), Field('b', 2, REG), Field('c', 2, REG)),
    ops.CMP: (Field('value', 16, IMM), Field('reg', 2, REG)),
    ops.JMP: TARGET,
    ops.JEQ: TARGET,
    ops.JGT: TARGET,
    ops.JLT: TARGET,
    ops.STO: (Field('addr', 6, ADDR), Field('src', 2, REG)),
    ops.LOD: (Field('addr', 6, ADDR), Field('dst', 2, REG)),
    ops.HLT: ()
}


def layout(opcode: int) -> Tuple[Field, ...]:
    ''' Fields of a known opcode, empty for unknown ones '''
    return LAYOUTS.get(opcode, ())


def encode(opcode: int, operand: int = 0) -> int:
    if not 0 <= opcode < (1 << OPCODE_BITS):
        raise ValueError(f'Opcode {opcode} does not fit {OPCODE_BITS} bits')

    if not 0 <= operand <= OPERAND_MASK:
        raise ValueError(f'Operand {operand} does not fit the operand field')

    return (opcode << OPCODE_SHIFT) | operand


def decode(word: int) -> Tuple[int, int]:
    return (word >> OPCODE_SHIFT, word & OPERAND_MASK)


def pack_operand(opcode: int, values: Sequence[int]) -> int:
    fields = layout(opcode)

    if len(values) != len(fields):
        raise ValueError(f'Opcode {opcode} takes {len(fields)} operand fields, got {len(values)}')

    operand = 0

    for field, value in zip(fields, values):
        if not 0 <= value < field.limit:
            raise ValueError(f'Value {value} does not fit {field.width}-bit field {field.name}')

        operand = (operand << field.width) | value

    return operand


def unpack_operand(opcode: int, operand: int) -> Tuple[int, ...]:
    values = []

    for field in reversed(layout(opcode)):
        values.append(operand & (field.limit - 1))
        operand >>= field.width

    return tuple(reversed(values))


def used_bits(opcode: int) -> int:
    return sum(field.width for field in layout(opcode))


def assemble_word(opcode: int, values: Sequence[int] = ()) -> int:
    return encode(opcode, pack_operand(opcode, values))


def is_canonical(word: int) -> bool:
    ''' Word is a known opcode with no bits set outside its fields '''
    if not 0 <= word <= WORD_MASK:
        return False

    opcode, operand = decode(word)
    return opcode in LAYOUTS and operand >> used_bits(opcode) == 0
