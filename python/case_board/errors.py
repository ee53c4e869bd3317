from __future__ import annotations


class RequestFailed(Exception):
    def __init__(self, status_code: int, url: str, body_snippet: str = ""):
        super().__init__(f"API error {status_code} for {url}")
        self.status_code = status_code
        self.url = url
        self.body_snippet = body_snippet
