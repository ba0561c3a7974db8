"""
The token model for variant declarations, and the lexer that produces it.

A declaration is turned into a flat sequence of tokens, where bracketed regions have already been folded into `Group`
tokens holding their own (recursively well-formed) child sequences. Consumers never see an opening or closing bracket
as a separate token.
"""

import re

from dataclasses import dataclass
from enum import Enum
from typing import Tuple, Union, List, Optional

from atmfjstc.lib.variant_codegen.errors import UnexpectedTokenError, SourceLocatedError


class Delimiter(Enum):
    BRACE = ('{', '}')
    PAREN = ('(', ')')
    BRACKET = ('[', ']')

    @property
    def opener(self) -> str:
        return self.value[0]

    @property
    def closer(self) -> str:
        return self.value[1]


@dataclass(frozen=True)
class Identifier:
    text: str
    offset: int = 0

    def describe(self) -> str:
        return f"identifier '{self.text}'"


@dataclass(frozen=True)
class Punctuation:
    char: str
    offset: int = 0

    def describe(self) -> str:
        return f"'{self.char}'"


@dataclass(frozen=True)
class Literal:
    text: str
    "The literal exactly as it appears in the source"

    value: Union[int, float, str]
    offset: int = 0

    def describe(self) -> str:
        return f"literal {self.text}"


@dataclass(frozen=True)
class Group:
    delimiter: Delimiter
    children: Tuple['Token', ...]
    offset: int = 0

    def describe(self) -> str:
        return f"group {self.delimiter.opener}...{self.delimiter.closer}"


Token = Union[Identifier, Punctuation, Literal, Group]


def describe_token(token: Optional[Token]) -> str:
    return 'end of input' if token is None else token.describe()


_OPENERS = {delimiter.opener: delimiter for delimiter in Delimiter}
_CLOSERS = {delimiter.closer: delimiter for delimiter in Delimiter}

_SCANNER = re.compile(
    r'''
    (?P<space>\s+|//[^\n]*)
    | (?P<ident>[A-Za-z_][A-Za-z0-9_]*)
    | (?P<number>[0-9]+(?:\.[0-9]+)?)
    | (?P<string>"(?:[^"\\\n]|\\.)*")
    | (?P<unterminated>")
    | (?P<punct>\S)
    ''',
    re.VERBOSE
)


def tokenize(text: str) -> Tuple[Token, ...]:
    """
    Converts the text of a declaration into a token tree.

    Args:
        text: The declaration source.

    Returns:
        The top-level token sequence. Bracketed regions appear as `Group` tokens.

    Raises:
        UnexpectedTokenError: If brackets are unbalanced or mismatched, or a string literal is unterminated. The error
            carries the line and column where the problem was found.
    """
    try:
        return _tokenize(text)
    except SourceLocatedError as e:
        locate_error(e, text)
        raise


def _tokenize(text: str) -> Tuple[Token, ...]:
    # Each stack entry: (delimiter or None for top level, opening offset, collected children)
    stack: List[Tuple[Optional[Delimiter], int, List[Token]]] = [(None, 0, [])]

    for match in _SCANNER.finditer(text):
        kind = match.lastgroup
        lexeme = match.group()
        offset = match.start()
        children = stack[-1][2]

        if kind == 'space':
            continue
        elif kind == 'ident':
            children.append(Identifier(lexeme, offset))
        elif kind == 'number':
            children.append(Literal(lexeme, float(lexeme) if '.' in lexeme else int(lexeme), offset))
        elif kind == 'string':
            children.append(Literal(lexeme, _unescape(lexeme[1:-1]), offset))
        elif kind == 'unterminated':
            raise UnexpectedTokenError("unterminated string", "a closing '\"'", offset)
        elif lexeme in _OPENERS:
            stack.append((_OPENERS[lexeme], offset, []))
        elif lexeme in _CLOSERS:
            delimiter, start, group_children = stack.pop()
            if delimiter is None:
                raise UnexpectedTokenError(f"'{lexeme}'", "a matching opening bracket", offset)
            if _CLOSERS[lexeme] is not delimiter:
                raise UnexpectedTokenError(f"'{lexeme}'", f"'{delimiter.closer}'", offset)

            stack[-1][2].append(Group(delimiter, tuple(group_children), start))
        else:
            children.append(Punctuation(lexeme, offset))

    if len(stack) > 1:
        delimiter, start, _ = stack[-1]
        raise UnexpectedTokenError("end of input", f"'{delimiter.closer}' closing the group", start)

    return tuple(stack[0][2])


def _unescape(body: str) -> str:
    return re.sub(r'\\(.)', lambda m: {'n': '\n', 't': '\t'}.get(m.group(1), m.group(1)), body)


def locate_error(error: SourceLocatedError, text: str) -> SourceLocatedError:
    """
    Attaches a line and column to an error that refers to an offset in `text`, if it does not already have them.
    """
    if (error.offset is not None) and (error.location is None) and (0 <= error.offset <= len(text)):
        error.with_location(*find_line_col(text, error.offset))

    return error


def find_line_col(text: str, offset: int) -> Tuple[int, int]:
    """
    Returns the 1-based (line, column) corresponding to a character offset in a given text.

    The offset can also be equal to ``len(text)``, in which case the position of a virtual character just after the
    end of the text is reported.
    """

    if (offset < 0) or (offset > len(text)):
        raise IndexError(f"Offset {offset} lies outside text of length {len(text)}")

    line_start = text.rfind('\n', 0, offset) + 1

    return text.count('\n', 0, offset) + 1, 1 + offset - line_start
