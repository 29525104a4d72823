import logging as lg
from typing import List

import pyparsing as pp

import isc.sasm.grammar as grammar
from isc.sasm.fpp import FPP
from isc.sasm.errors import AssemblyFailed


class CompilationItem:
    name: str = '<string>'
    contents: str

    def __init__(self, contents: str = '', name: str | None = None):
        self.contents = contents

        if name is not None:
            self.name = name


def first_pass(fpp: FPP, item: CompilationItem):
    lg.info(f'Processing {item.name}')
    fpp.source = item.name

    for lineno, text in enumerate(item.contents.splitlines(), start=1):
        fpp.line = lineno

        try:
            actions = grammar.line.parse_string(text, parse_all=True)
        except pp.ParseException:
            fpp.on_fail(text)
            continue

        for (func, arg) in actions:  # type: ignore
            func(fpp, arg)


def second_pass(fpp: FPP) -> List[int]:
    words = []

    for cmd in fpp.cmd_list:
        if cmd[0] == 'word':
            words.append(cmd[3])

        if cmd[0] == 'ref':
            (_, line, source, opcode, values) = cmd
            word = fpp.resolve(line, source, opcode, values)
            words.append(0 if word is None else word)

    return words


def compile_items(compile_items: List[CompilationItem]) -> List[int]:
    fpp = FPP()

    for compile_item in compile_items:
        first_pass(fpp, compile_item)

    words = second_pass(fpp)

    if fpp.errors:
        order = {item.name: index for index, item in enumerate(compile_items)}
        errors = sorted(fpp.errors, key=lambda e: (order.get(e.source, 0), e.line))
        raise AssemblyFailed(errors)

    lg.debug(f'Assembled {len(words)} words')
    return words


def compile_string(contents: str, name: str = '<string>') -> List[int]:
    return compile_items([CompilationItem(contents, name)])
