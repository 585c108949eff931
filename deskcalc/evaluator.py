import sys
from typing import cast

from deskcalc.errors import ErrorKind, ErrorReporter
from deskcalc.symbols import SymbolTable
from deskcalc.tokenizer import TokenKind, TokenStream
from deskcalc.value import Failure, Result, Success

DEFAULT_MAX_DEPTH = 100
# one nesting level goes through primary, _primary, expr and term
FRAMES_PER_LEVEL = 4
# frames left for the caller of the evaluator
RESERVED_FRAMES = 250


def max_depth_limit() -> int:
    return max(1, (sys.getrecursionlimit() - RESERVED_FRAMES) // FRAMES_PER_LEVEL)


def check_max_depth(max_depth: int) -> int:
    limit = max_depth_limit()
    if not 1 <= max_depth <= limit:
        raise ValueError(f"max depth must be between 1 and {limit}, got {max_depth}")
    return max_depth


class Evaluator:
    """Recursive descent evaluator, computes the value while parsing.

    expr:    term (('+' | '-') term)*
    term:    primary (('*' | '/') primary)*
    primary: NUMBER | NAME ('=' expr)? | '-' primary | '(' expr ')'

    Every level takes `consume_first`: whether to advance the token stream before looking
    at the current token. Each level leaves the first token it could not use as current.
    """

    def __init__(
        self,
        tokens: TokenStream,
        symbols: SymbolTable,
        reporter: ErrorReporter,
        max_depth: int = DEFAULT_MAX_DEPTH,
    ) -> None:
        self.tokens = tokens
        self.symbols = symbols
        self.reporter = reporter
        self.max_depth = check_max_depth(max_depth)
        self._depth = 0

    def _fail(self, kind: ErrorKind, message: str) -> Failure:
        return Failure(self.reporter.report(kind, message))

    def expr(self, consume_first: bool) -> Result:
        left = self.term(consume_first)
        while isinstance(left, Success):
            kind = self.tokens.peek().kind
            if kind is TokenKind.PLUS:
                right = self.term(True)
                if isinstance(right, Failure):
                    return right
                left = Success(left.value + right.value)
            elif kind is TokenKind.MINUS:
                right = self.term(True)
                if isinstance(right, Failure):
                    return right
                left = Success(left.value - right.value)
            else:
                break
        return left

    def term(self, consume_first: bool) -> Result:
        left = self.primary(consume_first)
        while isinstance(left, Success):
            kind = self.tokens.peek().kind
            if kind is TokenKind.STAR:
                right = self.primary(True)
                if isinstance(right, Failure):
                    return right
                left = Success(left.value * right.value)
            elif kind is TokenKind.SLASH:
                right = self.primary(True)
                if isinstance(right, Failure):
                    return right
                if right.value == 0:
                    return self._fail(ErrorKind.ARITHMETIC, "divide by 0")
                left = Success(left.value / right.value)
            else:
                break
        return left

    def primary(self, consume_first: bool) -> Result:
        if consume_first:
            self.tokens.advance()
        if self._depth >= self.max_depth:
            return self._fail(ErrorKind.NESTING, "expression nested too deeply")
        self._depth += 1
        try:
            return self._primary()
        finally:
            self._depth -= 1

    def _primary(self) -> Result:
        token = self.tokens.peek()
        if token.kind is TokenKind.NUMBER:
            self.tokens.advance()
            return Success(cast(float, token.number))
        elif token.kind is TokenKind.NAME:
            entry = self.symbols.lookup_or_create(token.lexeme)
            if self.tokens.advance().kind is TokenKind.EQUAL:
                assigned = self.expr(True)
                if isinstance(assigned, Failure):
                    return assigned
                entry.value = assigned.value
            return Success(entry.value)
        elif token.kind is TokenKind.MINUS:
            operand = self.primary(True)
            if isinstance(operand, Failure):
                return operand
            return Success(-operand.value)
        elif token.kind is TokenKind.BRACKET_OPEN:
            inner = self.expr(True)
            if isinstance(inner, Failure):
                return inner
            closing = self.tokens.peek()
            if closing.error is not None:
                return Failure(closing.error)
            if closing.kind is not TokenKind.BRACKET_CLOSE:
                return self._fail(ErrorKind.SYNTAX, "')' expected")
            self.tokens.advance()
            return inner
        elif token.error is not None:
            # the lexer has already reported it
            return Failure(token.error)
        else:
            return self._fail(ErrorKind.SYNTAX, "primary expected")
