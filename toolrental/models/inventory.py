from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Iterable, Optional

from .tool import Tool, ToolCategory

logger = logging.getLogger(__name__)

DEFAULT_TOOLS = (
    Tool("CHNS", ToolCategory.CHAINSAW, "Stihl"),
    Tool("LADW", ToolCategory.LADDER, "Werner"),
    Tool("JAKD", ToolCategory.JACKHAMMER, "DeWalt"),
    Tool("JAKR", ToolCategory.JACKHAMMER, "Ridgid"),
)


def _tool_from_dict(d: dict) -> Tool:
    """Map a raw tool record to a Tool; raise ValueError on bad data."""
    code = d.get("code") or d.get("tool_code") or ""
    if not isinstance(code, str) or not code.strip():
        raise ValueError(f"Tool record without code: {d!r}")
    brand = d.get("brand") or ""
    if not isinstance(brand, str):
        raise ValueError(f"Tool record with bad brand: {d!r}")
    category = ToolCategory.parse(d.get("category") or d.get("type"))
    return Tool(code=code.strip(), category=category, brand=brand.strip())


class Inventory:
    """
    Immutable tool catalogue keyed by tool code.
    Built once and passed into the checkout service; never changes afterwards.
    """

    def __init__(self, tools: Iterable[Tool] = ()):
        by_code: dict[str, Tool] = {}
        for tool in tools:
            if tool.code in by_code:
                raise ValueError(f"Duplicate tool code: {tool.code}")
            by_code[tool.code] = tool
        self._tools = MappingProxyType(by_code)
        logger.debug(f"Inventory loaded: tools={len(by_code)}")

    # ---------- Factories ----------
    @classmethod
    def default(cls) -> "Inventory":
        """The standard store catalogue."""
        return cls(DEFAULT_TOOLS)

    @classmethod
    def from_records(cls, records: Iterable[dict]) -> "Inventory":
        """Build from dicts like {"code": "LADW", "category": "ladder", "brand": "Werner"}."""
        return cls(_tool_from_dict(r) for r in records)

    # ---------- Queries ----------
    def resolve_tool(self, code) -> Optional[Tool]:
        """Return the tool for `code`, or None when the code is unknown."""
        if not isinstance(code, str):
            return None
        return self._tools.get(code.strip())

    def codes(self) -> list:
        return sorted(self._tools)

    def __contains__(self, code) -> bool:
        return self.resolve_tool(code) is not None

    def __len__(self) -> int:
        return len(self._tools)

    def __iter__(self):
        return iter(self._tools.values())
