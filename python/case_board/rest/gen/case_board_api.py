# Case board REST API wire models.
# The backend stores boardState as an opaque JSON document, so these models only
# pull out the envelope fields and leave boardState untouched for the mapper.
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional


def _optional_str(raw: Dict[str, Any], key: str) -> Optional[str]:
    value = raw.get(key)
    return value if isinstance(value, str) else None


@dataclass(frozen=True)
class CaseBoardRecord:
    """Case board record returned by the REST API.

    Ref: GET /api/v1/cases/{caseId}/board
    Ref: PUT /api/v1/cases/{caseId}/board
    """

    case_id: Optional[str]
    board_state: Any
    updated_at: Optional[str] = None

    @staticmethod
    def from_dict(obj: Any) -> "CaseBoardRecord":
        if not isinstance(obj, dict):
            return CaseBoardRecord(case_id=None, board_state=None)
        return CaseBoardRecord(
            case_id=_optional_str(obj, "caseId"),
            board_state=obj.get("boardState"),
            updated_at=_optional_str(obj, "updatedAt"),
        )


@dataclass(frozen=True)
class SaveCaseBoardRequest:
    """Body of PUT /api/v1/cases/{caseId}/board."""

    board_state: Any

    def to_dict(self) -> Dict[str, Any]:
        return {"boardState": self.board_state}
