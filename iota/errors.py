from __future__ import annotations

from iota.reader.tokenizer import Token, TokenKind


def _describe_expected(expected: TokenKind | str) -> str:
    if isinstance(expected, TokenKind):
        return expected.name
    return str(expected)


def _describe_token(token: Token) -> str:
    if token.kind is TokenKind.EOF:
        return "end of input"
    return f"{token.kind.name} {token.text!r}"


class IotaError(Exception):
    """ Base class for all iota errors"""
    pass


class IotaSyntaxError(IotaError):
    """ Raised when the source does not match the grammar"""
    pass


class UnexpectedTokenError(IotaSyntaxError):
    """ Raised when the current token does not satisfy a grammar position"""

    def __init__(self, expected: TokenKind | str, token: Token):
        self.expected = expected
        self.token = token
        self.actual = token.kind
        super().__init__(
            f"Expected {_describe_expected(expected)} at offset {token.start}, "
            f"got {_describe_token(token)}"
        )


class ExpectedTokenError(UnexpectedTokenError):
    """ Raised when a required token (or a whole operand) is missing"""


class ExpectedOperatorError(UnexpectedTokenError):
    """ Raised when the token after '(' is not one of + - * /"""

    def __init__(self, token: Token):
        super().__init__("operator", token)


class TrailingInputError(IotaSyntaxError):
    """ Raised when tokens remain after a complete expression"""

    def __init__(self, token: Token):
        self.token = token
        super().__init__(
            f"Unexpected trailing input at offset {token.start}: {_describe_token(token)}"
        )


class MalformedNumberError(IotaSyntaxError):
    """ Raised when a NUMBER token is not a base-10 integer"""

    def __init__(self, token: Token):
        self.token = token
        super().__init__(f"Malformed number at offset {token.start}: {token.text!r}")


class NestingTooDeepError(IotaSyntaxError):
    """ Raised when expressions nest deeper than the configured limit"""

    def __init__(self, max_depth: int, token: Token):
        self.max_depth = max_depth
        self.token = token
        super().__init__(
            f"Expression nested deeper than {max_depth} levels at offset {token.start}"
        )


class IotaEvaluationError(IotaError):
    """ Raised when a well-formed tree cannot be reduced to a value"""
    pass


class DivisionByZeroError(IotaEvaluationError, ZeroDivisionError):
    """ Raised when the right operand of '/' evaluates to zero"""

    def __init__(self, dividend: int):
        self.dividend = dividend
        super().__init__(f"Division by zero: (/ {dividend} 0)")
