"""
This module contains the `TokenCursor` class, a read-only cursor over a token sequence that offers functions for
consuming tokens of an expected shape.
"""

from typing import Sequence, Optional, Callable, Iterable

from atmfjstc.lib.variant_codegen.errors import UnexpectedTokenError, MissingGroupError
from atmfjstc.lib.variant_codegen.tokens import Token, Identifier, Punctuation, Literal, Group, Delimiter, \
    describe_token


class TokenCursor:
    """
    This class wraps an (immutable) token sequence and tracks a position in it, with one token of lookahead.

    All the `expect_*` functions consume the token they examine only if it matches. The `meaning` parameter they
    accept is an indication of what the token is supposed to represent (e.g. "enum name") and is used in the text of
    any exceptions that may be thrown.
    """

    _tokens: Sequence[Token]
    _position: int = 0

    def __init__(self, tokens: Sequence[Token]):
        self._tokens = tokens

    def tell(self) -> int:
        return self._position

    def at_end(self) -> bool:
        return self._position >= len(self._tokens)

    def remaining(self) -> int:
        return len(self._tokens) - self._position

    def peek(self) -> Optional[Token]:
        """
        Returns the next token without consuming it, or None if the input is exhausted.
        """
        return None if self.at_end() else self._tokens[self._position]

    def advance(self) -> Optional[Token]:
        """
        Consumes and returns the next token, or returns None if the input is exhausted.
        """
        token = self.peek()

        if token is not None:
            self._position += 1

        return token

    def expect(self, predicate: Callable[[Token], bool], meaning: str) -> Token:
        """
        Consumes the next token, which must satisfy a predicate.

        Raises:
            UnexpectedTokenError: If the input is exhausted or the token does not match. The cursor is not advanced.
        """
        token = self.peek()

        if (token is None) or not predicate(token):
            raise UnexpectedTokenError(describe_token(token), meaning, self._offset_of(token))

        self._position += 1

        return token

    def expect_identifier(self, text: Optional[str] = None, meaning: Optional[str] = None) -> Identifier:
        return self.expect(
            lambda token: isinstance(token, Identifier) and ((text is None) or (token.text == text)),
            meaning or ('an identifier' if text is None else f"'{text}'")
        )

    def expect_punctuation(self, char: str, meaning: Optional[str] = None) -> Punctuation:
        return self.expect(
            lambda token: isinstance(token, Punctuation) and (token.char == char),
            meaning or f"'{char}'"
        )

    def maybe_punctuation(self, char: str) -> bool:
        """
        Consumes the next token if it is the given punctuation character.

        Returns:
            True if the punctuation was found (and consumed)
        """
        token = self.peek()

        if isinstance(token, Punctuation) and (token.char == char):
            self._position += 1
            return True

        return False

    def expect_literal(self, value_type: Optional[type] = None, meaning: Optional[str] = None) -> Literal:
        return self.expect(
            lambda token: isinstance(token, Literal) and ((value_type is None) or isinstance(token.value, value_type)),
            meaning or 'a literal'
        )

    def expect_end(self, meaning: str = 'end of input'):
        token = self.peek()

        if token is not None:
            raise UnexpectedTokenError(describe_token(token), meaning, token.offset)

    def expect_group(self, delimiter: Optional[Delimiter] = None) -> Group:
        """
        Consumes the next token, which must be a bracketed group (of a specific kind, if `delimiter` is given).

        Raises:
            MissingGroupError: If the next token is not a group, or is a group of the wrong kind.
        """
        token = self.peek()

        if not isinstance(token, Group) or ((delimiter is not None) and (token.delimiter is not delimiter)):
            raise MissingGroupError(describe_token(token), self._offset_of(token))

        self._position += 1

        return token

    def descend(self, delimiter: Optional[Delimiter] = None) -> 'TokenCursor':
        """
        Consumes the next group token and returns a fresh cursor over its children.
        """
        return TokenCursor(self.expect_group(delimiter).children)

    def _offset_of(self, token: Optional[Token]) -> Optional[int]:
        if token is not None:
            return token.offset
        if len(self._tokens) > 0:
            return self._tokens[-1].offset

        return None


def iter_group_identifiers(group: Group) -> Iterable[Identifier]:
    """
    Iterates over the immediate `Identifier` children of a group, skipping punctuation, literals and nested groups.

    Each call starts a new iteration from the first child.
    """
    return (child for child in group.children if isinstance(child, Identifier))
