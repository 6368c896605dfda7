"""
Validation Package - Request Parameter Validation.

This package provides:
    - RequestValidator: Parse raw query parameters into a ListQuery
    - ValidationError: Raised for malformed parameters (status 400)

Design Principles:
    - Fail fast on invalid input
    - Clear, actionable error messages
    - The query core never raises ValidationError
"""

from pulse_query.validation.request_validator import RequestValidator, ValidationError

__all__ = [
    "RequestValidator",
    "ValidationError",
]
