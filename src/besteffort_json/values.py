"""Value types for Best-Effort JSON."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Union


class _Null:
    """Singleton for the JSON ``null`` literal."""

    _instance: "_Null | None" = None

    def __new__(cls) -> "_Null":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "Null"

    def __bool__(self) -> bool:
        return False

    def __str__(self) -> str:
        return "null"

    def to_python(self) -> None:
        return None


Null = _Null()


@dataclass
class VBool:
    value: bool

    def __str__(self) -> str:
        return str(self.value).lower()

    def to_python(self) -> bool:
        return self.value


@dataclass
class VNumber:
    value: int | float

    @property
    def is_integer(self) -> bool:
        return isinstance(self.value, int)

    @property
    def int_value(self) -> int:
        return int(self.value)

    @property
    def float_value(self) -> float:
        return float(self.value)

    def __str__(self) -> str:
        return repr(self.value)

    def to_python(self) -> int | float:
        return self.value


@dataclass
class VString:
    value: str

    def __str__(self) -> str:
        return self.value

    def to_python(self) -> str:
        return self.value


@dataclass
class VArray:
    items: list["Value"] = field(default_factory=list)

    def __str__(self) -> str:
        return "[" + ", ".join(str(v) for v in self.items) + "]"

    def to_python(self) -> list[Any]:
        return [v.to_python() for v in self.items]


@dataclass
class VObject:
    entries: dict[str, "Value"] = field(default_factory=dict)

    def __str__(self) -> str:
        return "{" + ", ".join(f"{k}: {v}" for k, v in self.entries.items()) + "}"

    def to_python(self) -> dict[str, Any]:
        return {k: v.to_python() for k, v in self.entries.items()}


Value = Union[VBool, VNumber, VString, VArray, VObject, _Null]
