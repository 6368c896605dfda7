"""
Configuration Loader - Layered YAML Documents over Built-in Defaults.

A configuration is assembled from up to three layers, later layers
winning key by key (nested mappings are merged, everything else is
replaced):

    1. Built-in defaults (QueryConfig())
    2. The config file (explicit path, or $PULSE_QUERY_CONFIG)
    3. An optional profile: <profiles_dir>/<name>.yaml

The merged document is validated once, at the end.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

import yaml

from pulse_query.config.models import QueryConfig

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "PULSE_QUERY_CONFIG"

PathLike = Union[str, Path]


class ConfigLoader:
    """Builds a validated QueryConfig from YAML layers."""

    def __init__(
        self,
        base_path: Optional[Path] = None,
        profiles_dir: PathLike = Path("config") / "profiles",
    ) -> None:
        """
        Args:
            base_path: Directory relative paths are resolved against
            profiles_dir: Directory holding profile documents
        """
        self._base_path = Path(base_path) if base_path else Path(".")
        self._profiles_dir = self._resolve(profiles_dir)

    def load(
        self,
        config_path: Optional[PathLike] = None,
        profile: Optional[str] = None,
    ) -> QueryConfig:
        """
        Load and validate a configuration.

        Args:
            config_path: YAML file; falls back to $PULSE_QUERY_CONFIG,
                then to the built-in defaults alone
            profile: Profile name layered over the file

        Returns:
            Validated QueryConfig

        Raises:
            FileNotFoundError: If the file or the profile does not exist
            ValueError: If a document is not a mapping
            pydantic.ValidationError: If the merged values are invalid
        """
        config_path = config_path or os.environ.get(CONFIG_ENV_VAR)

        layers = []
        if config_path:
            layers.append(self._read_document(self._resolve(config_path)))
        if profile:
            layers.append(self._read_document(self._profile_path(profile)))

        document: Dict[str, Any] = {}
        for layer in layers:
            document = merge_documents(document, layer)
        return self.load_from_dict(document)

    def load_from_dict(self, document: Mapping[str, Any]) -> QueryConfig:
        """Validate a (possibly partial) document merged over the defaults."""
        defaults = QueryConfig().model_dump(mode="json")
        return QueryConfig.model_validate(merge_documents(defaults, document))

    def _resolve(self, path: PathLike) -> Path:
        candidate = Path(path)
        return candidate if candidate.is_absolute() else self._base_path / candidate

    def _profile_path(self, profile: str) -> Path:
        path = self._profiles_dir / f"{profile}.yaml"
        if not path.exists():
            raise FileNotFoundError(f"Profile not found: {profile}")
        return path

    def _read_document(self, path: Path) -> Dict[str, Any]:
        with open(path, encoding="utf-8") as f:
            document = yaml.safe_load(f)
        if document is None:
            document = {}
        if not isinstance(document, dict):
            raise ValueError(f"Config document must be a mapping: {path}")
        logger.info(f"Loaded config layer: {path}")
        return document


def merge_documents(
    base: Mapping[str, Any],
    overlay: Mapping[str, Any],
) -> Dict[str, Any]:
    """Return base with overlay merged in; inputs are left unchanged."""
    merged = dict(base)
    for key, value in overlay.items():
        current = merged.get(key)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            merged[key] = merge_documents(current, value)
        else:
            merged[key] = value
    return merged


def load_config(
    config_path: Optional[PathLike] = None,
    profile: Optional[str] = None,
    base_path: Optional[Path] = None,
) -> QueryConfig:
    """Shortcut for ``ConfigLoader(base_path).load(config_path, profile)``."""
    return ConfigLoader(base_path=base_path).load(config_path, profile)
