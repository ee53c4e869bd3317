from __future__ import annotations

from typing import Any

from ...canonical_models import BoardState, BoardStateResult


def parse_board_state(raw: Any) -> BoardStateResult:
    """Coerce a stored board payload into a BoardState.

    Never raises. Fields that are missing or of the wrong JSON type are
    replaced with empty values and flagged on the result.
    """
    if isinstance(raw, BoardState):
        raw = raw.to_dict()
    if not isinstance(raw, dict):
        return BoardStateResult(
            state=BoardState(items={}, lines=[]),
            items_defaulted=True,
            lines_defaulted=True,
        )

    items = raw.get("items")
    lines = raw.get("lines")
    items_ok = isinstance(items, dict)
    lines_ok = isinstance(lines, list)
    return BoardStateResult(
        state=BoardState(
            items=items if items_ok else {},
            lines=lines if lines_ok else [],
        ),
        items_defaulted=not items_ok,
        lines_defaulted=not lines_ok,
    )


def normalize_board_state(raw: Any) -> BoardState:
    return parse_board_state(raw).state
