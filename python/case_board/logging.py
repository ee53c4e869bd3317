from __future__ import annotations

import logging
from typing import Any, Dict, Mapping


def get_logger(logger: logging.Logger | None = None) -> logging.Logger:
    return logger if logger is not None else logging.getLogger("case_board")


def request_log_fields(method: str, url: str, headers: Mapping[str, str]) -> Dict[str, Any]:
    """Fields attached to the per-request debug record.

    Only header names are logged; the content type is the one header whose
    value matters for reading a board exchange.
    """
    content_type = None
    names = []
    for key, value in headers.items():
        lowered = key.lower()
        names.append(lowered)
        if lowered == "content-type":
            content_type = value
    return {
        "method": method.upper(),
        "url": url,
        "content_type": content_type,
        "header_names": sorted(names),
    }
