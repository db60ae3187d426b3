"""Tests for importcheck.config.

Python 3.13+.
"""

from __future__ import annotations

import asyncio

import pytest

from importcheck.config import StaticConfigProvider, WorkspaceConfig
from importcheck.diagnostics.errors import ConfigurationError


class TestWorkspaceConfig:
    """Settings parsing."""

    def test_defaults(self) -> None:
        """Analysis is enabled unless configured otherwise."""
        assert WorkspaceConfig().enable is True
        assert WorkspaceConfig.from_mapping(None) == WorkspaceConfig()
        assert WorkspaceConfig.from_mapping({}) == WorkspaceConfig()

    def test_disable(self) -> None:
        """enable=False is honored."""
        assert WorkspaceConfig.from_mapping({"enable": False}).enable is False

    def test_unknown_keys_ignored(self) -> None:
        """Settings for other features do not interfere."""
        config = WorkspaceConfig.from_mapping({"enable": True, "lint": {"rules": []}})
        assert config == WorkspaceConfig(enable=True)

    @pytest.mark.parametrize("value", ["false", 0, 1, None, []])
    def test_non_boolean_rejected(self, value: object) -> None:
        """enable must be a real boolean."""
        with pytest.raises(ConfigurationError, match="must be a boolean"):
            WorkspaceConfig.from_mapping({"enable": value})


class TestStaticConfigProvider:
    """Fixed per-document configuration."""

    def test_default_enabled(self) -> None:
        """The default provider enables every document."""
        config = asyncio.run(StaticConfigProvider().get_workspace_config("file:///a.ts"))
        assert config.enable

    def test_returns_given_config(self) -> None:
        """The configured value is returned for any URI."""
        provider = StaticConfigProvider(WorkspaceConfig(enable=False))
        for uri in ("file:///a.ts", "untitled:1"):
            assert asyncio.run(provider.get_workspace_config(uri)).enable is False
