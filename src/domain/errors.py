"""
Caller-facing error base.

Every failure a handler can report is a deterministic consequence of the
request: it carries the exact message returned to the client and is
surfaced as a 400 response by the API layer.
"""

from __future__ import annotations


class ApiInputError(Exception):
    """Base class for errors caused by caller input."""

    code: str = "invalid_request"

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)
