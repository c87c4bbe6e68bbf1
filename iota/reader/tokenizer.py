"""
  Tokenizer for iota's prefix arithmetic dialect

- Pull based: the parser calls advance() whenever it needs the next token
- Tokens never copy text: each one is a (start, end) span over the source
  string, and Token.text slices it on demand
- Whitespace is skipped, never emitted
- Any character that is not part of the grammar becomes an UNKNOWN token;
  rejecting it is the parser's job
"""

from __future__ import annotations

import re
from enum import Enum, auto, unique
from typing import Iterator, NamedTuple, Optional


@unique
class TokenKind(Enum):
    LPAREN = auto()
    RPAREN = auto()
    NUMBER = auto()
    PLUS = auto()
    MINUS = auto()
    STAR = auto()
    SLASH = auto()
    EOF = auto()
    UNKNOWN = auto()


OPERATOR_KINDS: dict[TokenKind, str] = {
    TokenKind.PLUS: "+",
    TokenKind.MINUS: "-",
    TokenKind.STAR: "*",
    TokenKind.SLASH: "/",
}


WHITESPACE_RE = re.compile(r"\s*")

# Group names map one-to-one onto TokenKind members (upper-cased).
TOKEN_RE = re.compile(
    r"(?P<lparen>\()"
    r"|(?P<rparen>\))"
    r"|(?P<number>[0-9]+)"  # ASCII digits only, maximal run
    r"|(?P<plus>\+)"
    r"|(?P<minus>-)"
    r"|(?P<star>\*)"
    r"|(?P<slash>/)"
    r"|(?P<unknown>.)",  # fallback: any single character
    re.DOTALL,
)


class Token(NamedTuple):
    kind: TokenKind
    source: str
    start: int
    end: int

    @property
    def text(self) -> str:
        return self.source[self.start:self.end]

    def __repr__(self):
        return f"Token({self.kind.name}, {self.text!r}, {self.start}:{self.end})"


class Tokenizer:
    """Scans one token per advance() call.

    `current` is None until the first advance(). Once the end of the source is
    reached every further advance() produces another EOF token.

    Two notions of exhaustion are exposed:
      done   -- the current token is EOF (what the parser checks for trailing input)
      at_end -- the scan offset has reached the end of the source, which can
                already be true while the last real token is still current
    """

    __slots__ = ("source", "pos", "_current")

    def __init__(self, source: str):
        self.source = source
        self.pos = 0
        self._current: Optional[Token] = None

    @property
    def current(self) -> Optional[Token]:
        return self._current

    @property
    def done(self) -> bool:
        return self._current is not None and self._current.kind is TokenKind.EOF

    @property
    def at_end(self) -> bool:
        return self.pos >= len(self.source)

    def advance(self) -> Token:
        source = self.source
        n = len(source)
        self.pos = WHITESPACE_RE.match(source, self.pos).end()

        if self.pos >= n:
            token = Token(TokenKind.EOF, source, n, n)
        else:
            m = TOKEN_RE.match(source, self.pos)
            token = Token(TokenKind[m.lastgroup.upper()], source, m.start(), m.end())
            self.pos = m.end()

        self._current = token
        return token


def lex(source: str) -> Iterator[Token]:
    """Token generator: yields every token of `source`, ending with EOF."""
    tokenizer = Tokenizer(source)
    while True:
        token = tokenizer.advance()
        yield token
        if token.kind is TokenKind.EOF:
            return
