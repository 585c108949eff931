import sys
from io import StringIO
from typing import Iterator, Optional, TextIO

from deskcalc.errors import ErrorKind, ErrorReporter
from deskcalc.evaluator import DEFAULT_MAX_DEPTH, Evaluator, check_max_depth
from deskcalc.symbols import SymbolTable, with_builtins
from deskcalc.tokenizer import Lexer, TokenKind, TokenStream
from deskcalc.utils import format_number
from deskcalc.value import Failure, Result, Success

STATEMENT_BOUNDARY = (TokenKind.EXPR_END, TokenKind.END)


class Session:
    """Owns the symbol table and the error count shared by every statement evaluated through it"""

    def __init__(
        self,
        err: Optional[TextIO] = None,
        constants: Optional[dict[str, float]] = None,
        max_depth: int = DEFAULT_MAX_DEPTH,
    ) -> None:
        self.reporter = ErrorReporter(stream=err)
        self.symbols = with_builtins() if constants is None else SymbolTable(constants)
        self.max_depth = check_max_depth(max_depth)

    @property
    def error_count(self) -> int:
        return self.reporter.count

    def evaluate_stream(self, source: TextIO) -> Iterator[Result]:
        """Yields one result per statement, statements being separated by newlines or ';'.
        Empty statements are skipped."""
        tokens = TokenStream(Lexer(source, self.reporter))
        evaluator = Evaluator(tokens, self.symbols, self.reporter, max_depth=self.max_depth)
        while True:
            token = tokens.advance()
            if token.kind is TokenKind.END:
                return
            elif token.error is not None:
                yield Failure(token.error)
                continue
            elif token.kind is TokenKind.EXPR_END:
                continue

            result = evaluator.expr(False)
            if isinstance(result, Success):
                trailing = tokens.peek()
                if trailing.error is not None:
                    result = Failure(trailing.error)
                elif trailing.kind not in STATEMENT_BOUNDARY:
                    result = Failure(self.reporter.report(ErrorKind.SYNTAX, f"unexpected {trailing.kind}"))
            if isinstance(result, Failure):
                # skip the rest of the failed statement
                while tokens.peek().kind not in STATEMENT_BOUNDARY:
                    tokens.advance()
            yield result

    def evaluate(self, code: str) -> list[Result]:
        return list(self.evaluate_stream(StringIO(code)))

    def calculate(self, source: TextIO, out: Optional[TextIO] = None) -> int:
        """Prints the value of every statement that evaluated cleanly, returns the error count"""
        for result in self.evaluate_stream(source):
            if isinstance(result, Success):
                print(format_number(result.value), file=out if out is not None else sys.stdout)
        return self.error_count
