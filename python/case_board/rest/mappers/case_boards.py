from __future__ import annotations

from ...canonical_models import CaseBoard
from ..gen.case_board_api import CaseBoardRecord
from .board_state import normalize_board_state


def map_case_board(*, case_id: str, record: CaseBoardRecord) -> CaseBoard:
    return CaseBoard(
        case_id=record.case_id or case_id,
        board_state=normalize_board_state(record.board_state),
        updated_at=record.updated_at,
    )
