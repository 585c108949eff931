import enum

# above this not every integer is representable, repr switches to exponent notation
EXACT_INTEGER_LIMIT = 1e16


class PrintableEnum(enum.Enum):
    def __str__(self) -> str:
        return self.name

    __repr__ = __str__


def format_number(value: float) -> str:
    """Integral values are printed without the trailing '.0', as long as every digit is exact"""
    if abs(value) < EXACT_INTEGER_LIMIT and value == int(value):
        return str(int(value))
    return repr(value)
