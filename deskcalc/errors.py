import enum
import sys
from dataclasses import dataclass
from typing import Optional, TextIO

from deskcalc.utils import PrintableEnum


class ErrorKind(PrintableEnum):
    LEXICAL = enum.auto()
    SYNTAX = enum.auto()
    ARITHMETIC = enum.auto()
    NESTING = enum.auto()


@dataclass
class CalcError:
    kind: ErrorKind
    message: str

    def __str__(self) -> str:
        return f"error: {self.message}"


@dataclass
class ErrorReporter:
    """Counts reported errors and writes each one to the error stream as it happens"""

    stream: Optional[TextIO] = None
    count: int = 0
    last_error: Optional[CalcError] = None

    def report(self, kind: ErrorKind, message: str) -> CalcError:
        error = CalcError(kind=kind, message=message)
        self.count += 1
        self.last_error = error
        print(error, file=self.stream if self.stream is not None else sys.stderr)
        return error
