import asyncio
import logging
import os
import uuid

import pytest

from case_board import CaseBoardRestClient, load_board, save_board


def _base_url():
    return os.getenv("CASE_BOARD_LIVE_BASE_URL")


def test_live_smoke(caplog):
    base_url = _base_url()
    if not base_url:
        pytest.skip("Integration base URL not provided")

    case_id = os.getenv("CASE_BOARD_LIVE_CASE_ID") or f"smoke-{uuid.uuid4().hex[:8]}"
    state = {"items": {"smoke": {"x": 0, "y": 0}}, "lines": []}

    async def scenario():
        logger = logging.getLogger("case_board.integration")
        async with CaseBoardRestClient(base_url, timeout_seconds=30.0, logger=logger) as client:
            await save_board(client, case_id, state)
            return await load_board(client, case_id)

    with caplog.at_level(logging.DEBUG):
        loaded = asyncio.run(scenario())

    assert loaded.items == state["items"]
    assert loaded.lines == []
