# type: ignore
''' Line grammar '''

import pyparsing as pp

from isc.sasm.fpp import FPP


id = pp.Word(pp.alphas + '_', pp.alphanums + '_')
comment = pp.Suppress(pp.one_of('// ;') + pp.rest_of_line)

label = (id + pp.Suppress(':')).set_parse_action(lambda r: (FPP.on_label, r[0]))

mnemonic = pp.Word(pp.alphas, pp.alphanums + '_')
operand = pp.Regex(r'[^\s;/]+')

instruction = (mnemonic + pp.ZeroOrMore(operand)).set_parse_action(
    lambda r: (FPP.issue_instruction, list(r)))

line = pp.Optional(label) + pp.Optional(instruction) + pp.Optional(comment)
