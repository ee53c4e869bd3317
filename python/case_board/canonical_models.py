from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


# Board payloads hold mutable JSON containers, so these models compare by value
# but are explicitly unhashable.
@dataclass(frozen=True)
class BoardState:
    items: Dict[str, Any] = field(default_factory=dict)
    lines: List[Any] = field(default_factory=list)

    __hash__ = None  # type: ignore[assignment]

    def to_dict(self) -> Dict[str, Any]:
        return {"items": self.items, "lines": self.lines}


@dataclass(frozen=True)
class BoardStateResult:
    state: BoardState
    items_defaulted: bool = False
    lines_defaulted: bool = False

    __hash__ = None  # type: ignore[assignment]

    @property
    def is_default(self) -> bool:
        return self.items_defaulted and self.lines_defaulted


@dataclass(frozen=True)
class CaseBoard:
    case_id: str
    board_state: BoardState
    updated_at: Optional[str] = None

    __hash__ = None  # type: ignore[assignment]
