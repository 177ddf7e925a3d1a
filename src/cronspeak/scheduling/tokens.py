"""Validating lexer for cron expressions.

The lexer classifies one character at a time and checks each token against
the kind of the token before it. A synthetic delimiter opens the stream so an
expression may start with a pattern, and an end-of-input token closes it.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterator

from cronspeak.scheduling.errors import CronSyntaxError, ErrorKind


class TokenKind(Enum):
    """Lexical classes of cron expression characters."""

    DELIM = auto()
    ASTERISK = auto()
    COMMA = auto()
    NUM = auto()
    DASH = auto()
    SLASH = auto()
    ALPHA = auto()
    EOF = auto()


@dataclass(frozen=True)
class Token:
    """A classified character."""

    kind: TokenKind
    char: str = ""

    def __repr__(self) -> str:
        if self.char and self.kind in (TokenKind.NUM, TokenKind.ALPHA):
            return f"{self.kind.name}({self.char!r})"
        return self.kind.name


DELIMITERS = frozenset(" \t\r\n\0")

_SYMBOLS: dict[str, TokenKind] = {
    "*": TokenKind.ASTERISK,
    ",": TokenKind.COMMA,
    "-": TokenKind.DASH,
    "/": TokenKind.SLASH,
}

_VALUE = frozenset({TokenKind.ASTERISK, TokenKind.NUM, TokenKind.ALPHA})

# candidate kind -> kinds it may follow
LEGAL_PREDECESSORS: dict[TokenKind, frozenset[TokenKind]] = {
    TokenKind.ASTERISK: frozenset({TokenKind.DELIM, TokenKind.COMMA}),
    TokenKind.COMMA: _VALUE,
    TokenKind.NUM: frozenset({
        TokenKind.DELIM, TokenKind.NUM, TokenKind.SLASH,
        TokenKind.COMMA, TokenKind.DASH,
    }),
    TokenKind.DASH: frozenset({TokenKind.NUM, TokenKind.ALPHA}),
    TokenKind.SLASH: _VALUE,
    TokenKind.ALPHA: frozenset({
        TokenKind.DELIM, TokenKind.ALPHA, TokenKind.SLASH,
        TokenKind.COMMA, TokenKind.DASH,
    }),
    TokenKind.DELIM: _VALUE | {TokenKind.DELIM},
    TokenKind.EOF: _VALUE | {TokenKind.DELIM},
}


def classify(char: str) -> TokenKind | None:
    """Return the token kind of a character, or None if it is not accepted."""
    if char in _SYMBOLS:
        return _SYMBOLS[char]
    if char in DELIMITERS:
        return TokenKind.DELIM
    # str.isdigit()/isalpha() accept non-ASCII characters
    if "0" <= char <= "9":
        return TokenKind.NUM
    if "a" <= char <= "z" or "A" <= char <= "Z":
        return TokenKind.ALPHA
    return None


def is_legal_after(candidate: TokenKind, previous: TokenKind) -> bool:
    return previous in LEGAL_PREDECESSORS[candidate]


def iter_tokens(expression: str) -> Iterator[Token]:
    """Lazily lex an expression.

    Args:
        expression: Raw expression text.

    Yields:
        Tokens, starting with a synthetic DELIM and ending with EOF.

    Raises:
        CronSyntaxError: On an unknown character, an illegal token pairing,
            or an expression that ends after a token that cannot close it.
    """
    previous = TokenKind.DELIM
    yield Token(TokenKind.DELIM)

    for position, char in enumerate(expression):
        kind = classify(char)
        if kind is None:
            raise CronSyntaxError(
                f"Unknown character {char!r} at position {position}",
                ErrorKind.UNKNOWN_CHARACTER,
                value=char,
                expression=expression,
                position=position,
            )
        if not is_legal_after(kind, previous):
            raise CronSyntaxError(
                f"Illegal token {char!r} at position {position}",
                ErrorKind.ILLEGAL_TOKEN,
                value=char,
                expression=expression,
                position=position,
            )
        previous = kind
        yield Token(kind, char)

    if not is_legal_after(TokenKind.EOF, previous):
        raise CronSyntaxError(
            "Unexpected end of expression",
            ErrorKind.UNEXPECTED_END,
            expression=expression,
            position=len(expression),
        )
    yield Token(TokenKind.EOF)


def tokenize(expression: str) -> list[Token]:
    """Lex a whole expression into a token list.

    Raises:
        CronSyntaxError: See :func:`iter_tokens`.
    """
    return list(iter_tokens(expression))
