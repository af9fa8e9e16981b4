from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union


class ToolCategory(str, Enum):
    """
    Closed set of rentable tool categories.
    The value is the type name shown on the rental agreement.
    """
    LADDER = "Ladder"
    CHAINSAW = "Chainsaw"
    JACKHAMMER = "Jackhammer"

    @property
    def type_name(self) -> str:
        return self.value

    @classmethod
    def parse(cls, value: Union[str, "ToolCategory"]) -> "ToolCategory":
        """
        Accept a member, its name or its type name (case-insensitive).
        Raise ValueError for anything else.
        """
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise ValueError(f"Unknown tool category: {value!r}")
        key = value.strip().lower()
        for member in cls:
            if key in (member.name.lower(), member.value.lower()):
                return member
        raise ValueError(f"Unknown tool category: {value!r}")


@dataclass(frozen=True)
class Tool:
    """One rentable item. The inventory owns these; the checkout only reads them."""
    code: str
    category: ToolCategory
    brand: str
