import isc.common.ops as ops
import isc.common.codec as codec
import isc.sasm.asm as asm


def test_demo_program_encoding():
    source = '\n'.join([
        'ldi 1 r1',
        'ldi 1 r2',
        'add r1 r2 r2',
        'cmp 8 r2',
        'jlt 2',
        'sto 18 r2',
        'hlt',
    ])

    assert asm.compile_string(source) == [
        0b0001_0000000000000001_01,
        0b0001_0000000000000001_10,
        0b0010_000000000000_01_10_10,
        0b0100_0000000000001000_10,
        0b1000_0000000000000_00010,
        0b1001_0000000000_010010_10,
        0b1111_000000000000000000,
    ]


def test_blank_lines_and_comments_emit_nothing():
    source = '\n'.join([
        '// header',
        '',
        '   ',
        'ldi 5 r0   // five',
        'hlt ; done',
    ])

    assert asm.compile_string(source) == [
        codec.assemble_word(ops.LDI, [5, 0]),
        codec.assemble_word(ops.HLT),
    ]


def test_mnemonics_and_registers_are_case_insensitive():
    assert asm.compile_string('ADD R0 r1 R2') == asm.compile_string('add r0 r1 r2')


def test_labels_resolve_forward_and_backward():
    source = '\n'.join([
        'start: jmp end',
        'loop:',
        '  nop',
        '  jlt loop',
        'end: jeq start',
    ])

    assert asm.compile_string(source) == [
        codec.assemble_word(ops.JMP, [3]),
        codec.assemble_word(ops.NOP),
        codec.assemble_word(ops.JLT, [1]),
        codec.assemble_word(ops.JEQ, [0]),
    ]


def test_data_words_and_memory_labels():
    source = '\n'.join([
        'lod value r1',
        'sto result r1',
        'hlt',
        'value: dw 4000000000',
        'result: dw 0',
    ])

    assert asm.compile_string(source) == [
        codec.assemble_word(ops.LOD, [3, 1]),
        codec.assemble_word(ops.STO, [4, 1]),
        codec.assemble_word(ops.HLT),
        4000000000,
        0,
    ]


def test_items_share_labels():
    first = asm.CompilationItem('jmp shared', 'first.asm')
    second = asm.CompilationItem('shared: hlt', 'second.asm')

    assert asm.compile_items([first, second]) == [
        codec.assemble_word(ops.JMP, [1]),
        codec.assemble_word(ops.HLT),
    ]


def test_field_limits_are_inclusive():
    assert asm.compile_string('ldi 65535 r3\ncmp 65535 r0\njmp 31\nsto 63 r3') == [
        codec.assemble_word(ops.LDI, [65535, 3]),
        codec.assemble_word(ops.CMP, [65535, 0]),
        codec.assemble_word(ops.JMP, [31]),
        codec.assemble_word(ops.STO, [63, 3]),
    ]
