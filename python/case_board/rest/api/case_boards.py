from __future__ import annotations

from typing import Any, Mapping, Union
from urllib.parse import quote

from ...canonical_models import BoardState, CaseBoard
from ..client import CaseBoardRestClient
from ..env import config_from_env
from ..gen.case_board_api import CaseBoardRecord, SaveCaseBoardRequest
from ..mappers.board_state import normalize_board_state
from ..mappers.case_boards import map_case_board

BoardStateInput = Union[BoardState, Mapping[str, Any]]


def _board_path(case_id: str) -> str:
    if not isinstance(case_id, str) or not case_id.strip():
        raise ValueError("case_id is required")
    return f"/cases/{quote(case_id.strip(), safe='')}/board"


async def fetch_case_board(client: CaseBoardRestClient, case_id: str) -> CaseBoard:
    """Fetch the full case board record, with its state normalized."""
    payload = await client.get_json(_board_path(case_id))
    record = CaseBoardRecord.from_dict(payload)
    return map_case_board(case_id=case_id.strip(), record=record)


async def load_board(client: CaseBoardRestClient, case_id: str) -> BoardState:
    """Load the board state for a case.

    A case that has never been saved yields an empty board, never ``None``.

    Raises:
        ValueError: If case_id is blank
        RequestFailed: If the API answers with a non-2xx status
    """
    payload = await client.get_json(_board_path(case_id))
    record = CaseBoardRecord.from_dict(payload)
    return normalize_board_state(record.board_state)


async def save_board(
    client: CaseBoardRestClient,
    case_id: str,
    state: BoardStateInput,
) -> None:
    """Store ``state`` as the case's board; the echoed record is discarded.

    The state is sent as given, without normalization.

    Raises:
        ValueError: If case_id is blank
        RequestFailed: If the API answers with a non-2xx status
    """
    path = _board_path(case_id)
    board_state = state.to_dict() if isinstance(state, BoardState) else state
    body = SaveCaseBoardRequest(board_state=board_state)
    await client.put_json(path, body.to_dict())


async def load_board_via_env(case_id: str) -> BoardState:
    config = config_from_env()
    async with CaseBoardRestClient.from_config(config) as client:
        return await load_board(client, case_id)


async def save_board_via_env(case_id: str, state: BoardStateInput) -> None:
    config = config_from_env()
    async with CaseBoardRestClient.from_config(config) as client:
        await save_board(client, case_id, state)
