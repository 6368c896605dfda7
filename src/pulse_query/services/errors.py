"""
Service Errors.

Raised by services and mapped to HTTP-style status codes by the
handler layer.
"""

from __future__ import annotations


class NotFoundError(Exception):
    """An identifier lookup found nothing."""

    status_code = 404

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message
