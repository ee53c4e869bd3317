from .canonical_models import BoardState, BoardStateResult, CaseBoard
from .errors import RequestFailed
from .rest.api.case_boards import (
    fetch_case_board,
    load_board,
    load_board_via_env,
    save_board,
    save_board_via_env,
)
from .rest.client import CaseBoardRestClient
from .rest.env import (
    DEFAULT_API_BASE_URL,
    CaseBoardConfig,
    api_base_url_from_env,
    config_from_env,
    resolve_api_base_url,
)
from .rest.mappers.board_state import normalize_board_state, parse_board_state

__all__ = [
    "CaseBoardRestClient",
    "CaseBoardConfig",
    "DEFAULT_API_BASE_URL",
    "resolve_api_base_url",
    "api_base_url_from_env",
    "config_from_env",
    "RequestFailed",
    "BoardState",
    "BoardStateResult",
    "CaseBoard",
    "normalize_board_state",
    "parse_board_state",
    "load_board",
    "save_board",
    "fetch_case_board",
    "load_board_via_env",
    "save_board_via_env",
]
