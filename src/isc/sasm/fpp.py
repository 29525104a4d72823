''' First pass processor '''

import logging as lg
from typing import Any, Dict, List, Tuple

import isc.common.ops as ops
import isc.common.codec as codec
from isc.common.hwconf import REGISTER_PREFIX, WORD_MASK
from isc.sasm.errors import (
    AssembleError, UnknownMnemonic, MalformedOperand, UnknownLabel, DuplicateLabel
)

Tokens = List[Any]

# ('word', line, source, word) or ('ref', line, source, opcode, values)
Command = Tuple[Any, ...]


class FPP:
    cmd_list: List[Command]
    label_dict: Dict[str, int]
    errors: List[AssembleError]

    def __init__(self):
        self.cmd_list = list()
        self.offset = 0
        self.source = '<string>'
        self.line = 0
        self.label_dict = dict()
        self.errors = list()

    def error(self, error: AssembleError):
        lg.debug(f'Error {error}')
        self.errors.append(error)

    # Handlers
    def issue_word(self, word: int):
        self.cmd_list.append(('word', self.line, self.source, word))
        self.offset += 1

    def issue_ref(self, opcode: int, values: List[Any]):
        self.cmd_list.append(('ref', self.line, self.source, opcode, values))
        self.offset += 1

    def on_label(self, labelname: str):
        if labelname in self.label_dict:
            self.error(DuplicateLabel(self.line, labelname, self.source))
            return

        self.label_dict[labelname] = self.offset
        lg.debug(f'Label {labelname} @ {self.offset}')

    def issue_instruction(self, tokens: Tokens):
        name = str(tokens[0]).lower()
        args = [str(t) for t in tokens[1:]]

        if name == ops.DW:
            self.issue_data(args)
            return

        if name not in ops.MNEMONICS:
            self.error(UnknownMnemonic(self.line, str(tokens[0]), self.source))
            return

        opcode = ops.MNEMONICS[name]
        fields = codec.layout(opcode)

        if len(args) > len(fields):
            extra = args[len(fields)]
            self.error(MalformedOperand(self.line, name, extra, f'unexpected operand {extra!r}', self.source))
            return

        if len(args) < len(fields):
            missing = fields[len(args)]
            self.error(MalformedOperand(self.line, missing.name, None, 'missing', self.source))
            return

        values: List[Any] = []

        for field, token in zip(fields, args):
            value = self.parse_field(field, token)

            if value is None:
                return

            values.append(value)

        if any(isinstance(v, str) for v in values):
            self.issue_ref(opcode, values)
        else:
            lg.debug(f'Issuing {name} {values}')
            self.issue_word(codec.assemble_word(opcode, values))

    def issue_data(self, args: List[str]):
        if len(args) != 1:
            self.error(MalformedOperand(self.line, 'value', None, 'dw takes exactly one value', self.source))
            return

        value = self.parse_number('value', args[0], WORD_MASK + 1)

        if value is not None:
            self.issue_word(value)

    def parse_field(self, field: codec.Field, token: str) -> int | str | None:
        ''' Returns the value, a label name to resolve later, or None on error '''
        if field.kind == codec.REG:
            if token[:1].lower() != REGISTER_PREFIX:
                self.error(MalformedOperand(self.line, field.name, token, f'expected a register, got {token!r}', self.source))
                return None

            return self.parse_number(field.name, token[1:], field.limit, token)

        if field.kind == codec.ADDR and (token[:1].isalpha() or token[:1] == '_'):
            return token

        return self.parse_number(field.name, token, field.limit)

    def parse_number(self, name: str, digits: str, limit: int, token: str | None = None) -> int | None:
        token = digits if token is None else token

        if not digits.isdecimal():
            self.error(MalformedOperand(self.line, name, token, f'{token!r} is not an unsigned decimal', self.source))
            return None

        value = int(digits)

        if value >= limit:
            self.error(MalformedOperand(self.line, name, token, f'{value} does not fit below {limit}', self.source))
            return None

        return value

    def on_fail(self, text: str):
        words = [w for w in text.replace(':', ': ').split() if not w.endswith(':')]
        head = words[0] if words else text.strip()

        if head.lower() in ops.MNEMONICS or head.lower() == ops.DW:
            self.error(MalformedOperand(self.line, head, text.strip(), 'unable to parse operands', self.source))
        else:
            self.error(UnknownMnemonic(self.line, head, self.source))

    # Second pass
    def resolve(self, line: int, source: str, opcode: int, values: List[Any]) -> int | None:
        resolved = []

        for field, value in zip(codec.layout(opcode), values):
            if isinstance(value, str):
                if value not in self.label_dict:
                    self.errors.append(UnknownLabel(line, field.name, value, source))
                    return None

                address = self.label_dict[value]

                if address >= field.limit:
                    self.errors.append(MalformedOperand(
                        line, field.name, value, f'label at {address} does not fit below {field.limit}', source))
                    return None

                lg.debug(f'Ref {value} -> {address}')
                value = address

            resolved.append(value)

        return codec.assemble_word(opcode, resolved)
