"""
  Recursive-descent parser for iota

Grammar (binary operators only, one expression per source):

    expr := NUMBER | '(' OP expr expr ')'
    OP   := '+' | '-' | '*' | '/'

Each rule is one method. The parser pulls tokens from a Tokenizer as it goes
and fails fast: the first grammar violation raises, no partial tree is built.
"""

from __future__ import annotations

import logging
from typing import Optional

from iota.config import clamp_depth, get_max_depth
from iota.errors import (
    ExpectedOperatorError,
    ExpectedTokenError,
    MalformedNumberError,
    NestingTooDeepError,
    TrailingInputError,
    UnexpectedTokenError,
)
from iota.reader.tokenizer import OPERATOR_KINDS, Token, TokenKind, Tokenizer
from iota.types.tree import Binary, Leaf, Tree

logger = logging.getLogger(__name__)


def parse_number(token: Token) -> int:
    text = token.text
    # int() alone would also accept '_' separators and non-ASCII digits
    if not (text.isascii() and text.isdigit()):
        raise MalformedNumberError(token)
    return int(text, 10)


class Parser:
    """Builds a Tree from the tokens of a single expression.

    The parser owns its tokenizer. If the tokenizer has not produced a token
    yet, the constructor performs the first advance(); a tokenizer that has
    already advanced is used from its current token.
    """

    __slots__ = ("tokens", "max_depth", "_depth")

    def __init__(self, tokenizer: Tokenizer, max_depth: Optional[int] = None):
        self.tokens = tokenizer
        if tokenizer.current is None:
            tokenizer.advance()
        self.max_depth = get_max_depth() if max_depth is None else clamp_depth(max_depth)
        self._depth = 0

    def parse(self) -> Tree:
        try:
            tree = self.match_expression()
        except RecursionError:
            # Only reachable when the caller's own stack is already deep
            raise NestingTooDeepError(self.max_depth, self.tokens.current) from None
        if not self.tokens.done:
            raise TrailingInputError(self.tokens.current)
        logger.debug("parsed %s node from %d characters", type(tree).__name__, len(self.tokens.source))
        return tree

    def match_expression(self) -> Tree:
        token = self.tokens.current

        if token.kind is TokenKind.NUMBER:
            self.consume(TokenKind.NUMBER)
            return Leaf(parse_number(token))

        if token.kind is TokenKind.LPAREN:
            return self.match_binary_expression()

        # Closing paren or end of input where an operand belongs: it is missing
        if token.kind in (TokenKind.RPAREN, TokenKind.EOF):
            raise ExpectedTokenError("expression", token)

        raise UnexpectedTokenError("expression", token)

    def match_binary_expression(self) -> Binary:
        opening = self.consume(TokenKind.LPAREN)
        if self._depth >= self.max_depth:
            raise NestingTooDeepError(self.max_depth, opening)
        self._depth += 1
        try:
            op_token = self.tokens.current
            if op_token.kind not in OPERATOR_KINDS:
                raise ExpectedOperatorError(op_token)
            self.consume(op_token.kind)

            left = self.match_expression()
            right = self.match_expression()
            self.consume(TokenKind.RPAREN)
        finally:
            self._depth -= 1
        return Binary(OPERATOR_KINDS[op_token.kind], left, right)

    def consume(self, kind: TokenKind) -> Token:
        token = self.tokens.current
        if token.kind is not kind:
            raise ExpectedTokenError(kind, token)
        self.tokens.advance()
        return token


def parse(source: str, max_depth: Optional[int] = None) -> Tree:
    """Parse a complete source string into a Tree."""
    return Parser(Tokenizer(source), max_depth=max_depth).parse()
