"""Workspace configuration.

The editor owns configuration storage; this module only interprets the
settings it hands over and defines how the service asks for them.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Protocol

from importcheck.diagnostics.errors import ConfigurationError

__all__ = [
    "ConfigProvider",
    "StaticConfigProvider",
    "WorkspaceConfig",
]


@dataclass(frozen=True, slots=True)
class WorkspaceConfig:
    """Per-document analysis settings.

    Attributes:
        enable: When False, analysis reports nothing for the document
    """

    enable: bool = True

    @classmethod
    def from_mapping(cls, settings: Mapping[str, object] | None) -> WorkspaceConfig:
        """Build a config from an editor settings mapping.

        Missing keys take their defaults; unknown keys are ignored.

        Args:
            settings: Settings section, e.g. ``{"enable": True}`` (None = defaults)

        Returns:
            Parsed configuration

        Raises:
            ConfigurationError: If a known key has a value of the wrong type
        """
        if settings is None:
            return cls()

        enable = settings.get("enable", True)
        if not isinstance(enable, bool):
            msg = f"Setting 'enable' must be a boolean, got {type(enable).__name__}"
            raise ConfigurationError(msg)

        return cls(enable=enable)


class ConfigProvider(Protocol):
    """Protocol for looking up the configuration that applies to a document."""

    async def get_workspace_config(self, uri: str) -> WorkspaceConfig:
        """Return the configuration for the document at ``uri``."""
        ...  # pragma: no cover  # Protocol stub - not executable


@dataclass(frozen=True, slots=True)
class StaticConfigProvider:
    """ConfigProvider returning the same configuration for every document.

    Attributes:
        config: Configuration handed out (default: enabled)
    """

    config: WorkspaceConfig = WorkspaceConfig()

    async def get_workspace_config(self, uri: str) -> WorkspaceConfig:  # noqa: ARG002
        """Return the fixed configuration."""
        return self.config
