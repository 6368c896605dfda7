"""
API Module - Request Handlers.

Components:
    - QueryHandlers: One method per read endpoint
    - HandlerResponse: Status code plus JSON body
    - create_handlers: Wires services, registry and validator
"""

from pulse_query.api.handlers import HandlerResponse, QueryHandlers, create_handlers

__all__ = [
    "HandlerResponse",
    "QueryHandlers",
    "create_handlers",
]
