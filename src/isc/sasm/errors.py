from typing import List


class AssembleError(Exception):
    line: int
    source: str

    def __init__(self, line: int, message: str, source: str = '<string>'):
        super().__init__(message)
        self.line = line
        self.source = source
        self.message = message

    def __str__(self):
        return f'{self.source}:{self.line}: {self.message}'


class UnknownMnemonic(AssembleError):
    def __init__(self, line: int, mnemonic: str, source: str = '<string>'):
        super().__init__(line, f'Unknown mnemonic {mnemonic!r}', source)
        self.mnemonic = mnemonic


class MalformedOperand(AssembleError):
    def __init__(self, line: int, field: str, token: str | None, reason: str, source: str = '<string>'):
        super().__init__(line, f'Operand {field}: {reason}', source)
        self.field = field
        self.token = token


class UnknownLabel(MalformedOperand):
    def __init__(self, line: int, field: str, label: str, source: str = '<string>'):
        super().__init__(line, field, label, f'unknown label {label!r}', source)
        self.label = label


class DuplicateLabel(AssembleError):
    def __init__(self, line: int, label: str, source: str = '<string>'):
        super().__init__(line, f'Label {label!r} is already defined', source)
        self.label = label


class AssemblyFailed(Exception):
    ''' Every error found in the sources, in source order '''
    errors: List[AssembleError]

    def __init__(self, errors: List[AssembleError]):
        super().__init__(f'{len(errors)} assembly error(s)')
        self.errors = errors
