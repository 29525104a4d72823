''' Disassembler '''

from typing import Iterable, List

import isc.common.ops as ops
import isc.common.codec as codec
from isc.common.hwconf import REGISTER_PREFIX


def opcode_name(opcode: int, uppercase: bool = False) -> str:
    name = ops.NAMES.get(opcode, '')
    return name.upper() if uppercase else name


def opcode_name_long(opcode: int) -> str:
    return ops.LONG_NAMES.get(opcode, '')


def format_operands(opcode: int, operand: int, prefix: str = REGISTER_PREFIX) -> List[str]:
    values = codec.unpack_operand(opcode, operand)
    fields = codec.layout(opcode)

    return [
        f'{prefix}{value}' if field.kind == codec.REG else str(value)
        for field, value in zip(fields, values)
    ]


def disassemble(word: int) -> str:
    ''' Renders a word as a source line the assembler turns back into it '''
    if not codec.is_canonical(word):
        return f'{ops.DW} {word}'

    opcode, operand = codec.decode(word)
    return ' '.join([opcode_name(opcode)] + format_operands(opcode, operand))


def disassemble_long(word: int) -> str:
    opcode, operand = codec.decode(word)
    name = opcode_name_long(opcode)

    if not name:
        return f'UNKNOWN {opcode}'

    return ' '.join([name] + format_operands(opcode, operand, REGISTER_PREFIX.upper()))


def disassemble_program(words: Iterable[int]) -> List[str]:
    return [f'{address:2d}: {disassemble(word)}' for address, word in enumerate(words)]
