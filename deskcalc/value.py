from dataclasses import dataclass

from deskcalc.errors import CalcError, ErrorKind

FALLBACK_VALUE = 1.0


@dataclass
class Success:
    value: float

    @property
    def ok(self) -> bool:
        return True


@dataclass
class Failure:
    error: CalcError

    @property
    def ok(self) -> bool:
        return False

    @property
    def value(self) -> float:
        return FALLBACK_VALUE

    @property
    def kind(self) -> ErrorKind:
        return self.error.kind


Result = Success | Failure
