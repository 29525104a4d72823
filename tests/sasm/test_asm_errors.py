import pytest

import isc.sasm.asm as asm
from isc.sasm.errors import (
    AssembleError, AssemblyFailed, UnknownMnemonic, MalformedOperand, UnknownLabel, DuplicateLabel
)


def errors_of(source: str) -> list[AssembleError]:
    with pytest.raises(AssemblyFailed) as e:
        asm.compile_string(source, 'test.asm')

    return e.value.errors


def test_unknown_mnemonic_reports_line_and_continues():
    errors = errors_of('ldi 1 r0\nxyz 1 2\nadd r0 r0 r9\nhlt')

    assert len(errors) == 2

    assert isinstance(errors[0], UnknownMnemonic)
    assert errors[0].line == 2
    assert errors[0].mnemonic == 'xyz'
    assert errors[0].source == 'test.asm'
    assert str(errors[0]) == "test.asm:2: Unknown mnemonic 'xyz'"

    assert isinstance(errors[1], MalformedOperand)
    assert errors[1].line == 3
    assert errors[1].field == 'c'
    assert errors[1].token == 'r9'


@pytest.mark.parametrize('line, field', [
    ('ldi five r0', 'value'),
    ('ldi 65536 r0', 'value'),
    ('ldi -1 r0', 'value'),
    ('ldi 5 0', 'dst'),
    ('ldi 5 rx', 'dst'),
    ('ldi 5 r4', 'dst'),
    ('add r0 r1', 'c'),
    ('jmp 32', 'target'),
    ('sto 64 r0', 'addr'),
    ('cmp 8', 'reg'),
    ('dw 4294967296', 'value'),
])
def test_malformed_operands(line, field):
    (error,) = errors_of(line)

    assert isinstance(error, MalformedOperand)
    assert error.line == 1
    assert error.field == field


def test_extra_operand():
    (error,) = errors_of('hlt now')

    assert isinstance(error, MalformedOperand)
    assert error.token == 'now'


def test_unparseable_line():
    errors = errors_of('5 r0\nldi 5/2 r0')

    assert isinstance(errors[0], UnknownMnemonic)
    assert errors[0].line == 1
    assert isinstance(errors[1], MalformedOperand)
    assert errors[1].line == 2


def test_label_errors():
    errors = errors_of('a: nop\na: nop\njmp nowhere\nhlt')

    assert isinstance(errors[0], DuplicateLabel)
    assert errors[0].line == 2
    assert isinstance(errors[1], UnknownLabel)
    assert errors[1].line == 3
    assert errors[1].label == 'nowhere'


def test_label_beyond_jump_range():
    source = '\n'.join(['nop'] * 32 + ['far: hlt', 'jmp far', 'sto far r0'])
    errors = errors_of(source)

    assert len(errors) == 1
    assert errors[0].line == 34
    assert errors[0].field == 'target'


def test_errors_are_in_source_order():
    errors = errors_of('jmp missing\nbogus')

    assert [e.line for e in errors] == [1, 2]
