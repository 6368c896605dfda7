"""
Configuration Package - Models and Loaders.

Configuration Structure:
    - QueryConfig: Root configuration object
    - PaginationConfig: Page size bounds
    - MembershipConfig: Market-wide sentinel value
    - ResourcesConfig: Default ordering and sortable fields per resource

Design Principles:
    - Type-safe via Pydantic
    - Validation on load (fail fast)
    - Partial YAML documents merged over defaults
    - Support for profiles (config/profiles/<name>.yaml)
"""

from pulse_query.config.loader import ConfigLoader, load_config, merge_documents
from pulse_query.config.models import (
    MembershipConfig,
    PaginationConfig,
    QueryConfig,
    ResourceQueryConfig,
    ResourcesConfig,
)

__all__ = [
    "ConfigLoader",
    "load_config",
    "merge_documents",
    "MembershipConfig",
    "PaginationConfig",
    "QueryConfig",
    "ResourceQueryConfig",
    "ResourcesConfig",
]
