import enum
from dataclasses import dataclass
from io import StringIO
from typing import Callable, Optional, TextIO

from deskcalc.errors import CalcError, ErrorKind, ErrorReporter
from deskcalc.utils import PrintableEnum


class TokenKind(PrintableEnum):
    END = enum.auto()
    NUMBER = enum.auto()
    NAME = enum.auto()
    PLUS = enum.auto()
    MINUS = enum.auto()
    STAR = enum.auto()
    SLASH = enum.auto()
    EQUAL = enum.auto()
    BRACKET_OPEN = enum.auto()
    BRACKET_CLOSE = enum.auto()
    EXPR_END = enum.auto()


@dataclass
class Token:
    kind: TokenKind
    lexeme: str
    number: Optional[float] = None
    error: Optional[CalcError] = None

    def __str__(self) -> str:
        return f"<{self.kind}>{self.lexeme}"


def _is_digit(s: str) -> bool:
    return s.isascii() and s.isdigit()


def _is_valid_in_number(s: str) -> bool:
    return _is_digit(s) or s == "."


def _is_valid_in_name(s: str) -> bool:
    return s.isalnum()


SINGLE_CHAR_TOKENS = {
    "+": TokenKind.PLUS,
    "-": TokenKind.MINUS,
    "*": TokenKind.STAR,
    "/": TokenKind.SLASH,
    "(": TokenKind.BRACKET_OPEN,
    ")": TokenKind.BRACKET_CLOSE,
    "=": TokenKind.EQUAL,
    ";": TokenKind.EXPR_END,
    "\n": TokenKind.EXPR_END,
}


class Lexer:
    """Scans tokens from a text stream one at a time.

    Malformed input never raises: the error is reported and an EXPR_END token carrying it
    is returned, so the caller can resynchronize at the next statement boundary.
    """

    def __init__(self, source: TextIO, reporter: ErrorReporter) -> None:
        self.source = source
        self.reporter = reporter
        self._putback: Optional[str] = None

    def _getc(self) -> str:
        if self._putback is not None:
            ch, self._putback = self._putback, None
            return ch
        return self.source.read(1)

    def _ungetc(self, ch: str) -> None:
        if ch:  # "" is end of input, nothing to put back
            self._putback = ch

    def _scan_while(self, predicate: Callable[[str], bool]) -> str:
        lexeme = ""
        while True:
            ch = self._getc()
            if not predicate(ch):
                self._ungetc(ch)
                return lexeme
            lexeme += ch

    def _bad_token(self, message: str, lexeme: str) -> Token:
        error = self.reporter.report(ErrorKind.LEXICAL, message)
        return Token(kind=TokenKind.EXPR_END, lexeme=lexeme, error=error)

    def next_token(self) -> Token:
        ch = self._getc()
        while ch and ch != "\n" and ch.isspace():
            ch = self._getc()

        if not ch:
            return Token(kind=TokenKind.END, lexeme="")
        elif ch in SINGLE_CHAR_TOKENS:
            return Token(kind=SINGLE_CHAR_TOKENS[ch], lexeme=ch)
        elif _is_valid_in_number(ch):
            self._ungetc(ch)
            return self._scan_number()
        elif ch.isalpha():
            self._ungetc(ch)
            return Token(kind=TokenKind.NAME, lexeme=self._scan_while(_is_valid_in_name))
        else:
            return self._bad_token(f"bad token {ch!r}", lexeme=ch)

    def _scan_number(self) -> Token:
        lexeme = self._scan_while(_is_digit)
        ch = self._getc()
        if ch == ".":
            lexeme += ch + self._scan_while(_is_digit)
        else:
            self._ungetc(ch)
        if lexeme == ".":
            return self._bad_token(f"bad number {lexeme!r}", lexeme=lexeme)
        return Token(kind=TokenKind.NUMBER, lexeme=lexeme, number=float(lexeme))


class TokenStream:
    """One token of lookahead over a lexer: peek() is the current token, advance() scans the next"""

    def __init__(self, lexer: Lexer) -> None:
        self.lexer = lexer
        self._current = Token(kind=TokenKind.END, lexeme="")

    def peek(self) -> Token:
        return self._current

    def advance(self) -> Token:
        self._current = self.lexer.next_token()
        return self._current


def tokenize(code: str, reporter: Optional[ErrorReporter] = None) -> list[Token]:
    lexer = Lexer(StringIO(code), reporter if reporter is not None else ErrorReporter())
    tokens: list[Token] = []
    while True:
        token = lexer.next_token()
        if token.kind is TokenKind.END:
            return tokens
        tokens.append(token)
