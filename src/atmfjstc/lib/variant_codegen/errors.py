"""
Exceptions thrown while parsing variant declarations and generating code from them.

All of these are generation-time errors. None of them is ever referenced by the emitted code: the only failures the
generated programs themselves can signal come from the index-to-variant conversion, a plain `IndexError` for an index out
of range and a `TypeError` for a value that is not an ``int``.
"""

from typing import Optional, Tuple


class VariantCodegenError(Exception):
    """
    Base class for all exceptions related to generating code from a variant declaration.
    """


class SourceLocatedError(VariantCodegenError):
    """
    Base class for errors that refer to a specific position in the declaration text.
    """
    offset: Optional[int]
    location: Optional[Tuple[int, int]] = None

    def __init__(self, message: str, offset: Optional[int]):
        super().__init__(message)

        self.offset = offset

    def with_location(self, line: int, column: int) -> 'SourceLocatedError':
        self.location = (line, column)
        return self

    def __str__(self) -> str:
        message = super().__str__()

        if self.location is not None:
            return f"{message} (at line {self.location[0]}, column {self.location[1]})"

        return message


class UnexpectedTokenError(SourceLocatedError):
    found: str
    expected: str

    def __init__(self, found: str, expected: str, offset: Optional[int] = None):
        super().__init__(f"Expected {expected}, found {found}", offset)

        self.found = found
        self.expected = expected


class MissingKeywordError(VariantCodegenError):
    keyword: str

    def __init__(self, keyword: str):
        super().__init__(f"Keyword '{keyword}' not found before the end of input")

        self.keyword = keyword


class MissingGroupError(SourceLocatedError):
    found: str

    def __init__(self, found: str, offset: Optional[int] = None):
        super().__init__(f"Expected a bracketed group, found {found}", offset)

        self.found = found


class ExternalResourceMissingError(VariantCodegenError):
    path: str

    def __init__(self, path: str, kind: str = 'file'):
        super().__init__(f"Required {kind} '{path}' is missing")

        self.path = path


class HeightAllocationError(VariantCodegenError):
    """
    Thrown when the height allocator would hand out the same (or a decreasing) height to two variants.
    """
