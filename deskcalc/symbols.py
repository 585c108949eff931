from dataclasses import dataclass
from typing import Optional

BUILTIN_CONSTANTS: dict[str, float] = {
    "pi": 3.14159265359,
    "ee": 2.71828182846,
}


@dataclass
class Entry:
    name: str
    value: float = 0.0


class SymbolTable:
    """Variable name -> value. Looking up an unknown name creates it with value 0.0"""

    def __init__(self, initial: Optional[dict[str, float]] = None) -> None:
        self._entries: dict[str, Entry] = {}
        for name, value in (initial or {}).items():
            self.lookup_or_create(name).value = value

    def lookup_or_create(self, name: str) -> Entry:
        entry = self._entries.get(name)
        if entry is None:
            entry = Entry(name=name)
            self._entries[name] = entry
        return entry

    def __getitem__(self, name: str) -> float:
        return self._entries[name].value

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def as_dict(self) -> dict[str, float]:
        return {name: entry.value for name, entry in self._entries.items()}


def with_builtins() -> SymbolTable:
    return SymbolTable(BUILTIN_CONSTANTS)
