"""
Registry Module - Resource Kind Management.

Components:
    - ResourceRegistry: Central registry of queryable resource kinds
    - ResourceInfo: Metadata about a registered kind
    - create_default_registry: Registers every built-in kind
"""

from pulse_query.registry.resource_registry import (
    ResourceInfo,
    ResourceRegistry,
    create_default_registry,
)

__all__ = [
    "ResourceInfo",
    "ResourceRegistry",
    "create_default_registry",
]
