"""Module resolution service.

Provides the protocol the diagnostics synthesizer uses to locate the file
a specifier refers to, and a filesystem implementation that follows the
Deno module cache layout.

Components:
    ResolvedModule - Immutable result of resolving one specifier
    ModuleResolver - Protocol for resolution services (structural typing)
    DenoModuleResolver - Local paths plus the $DENO_DIR/deps remote cache

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol
from urllib.parse import unquote, urlsplit

from importcheck.constants import DEFAULT_DENO_DIR, DENO_DIR_ENV, REMOTE_SPECIFIER_PATTERN
from importcheck.diagnostics.errors import ModuleResolutionError

__all__ = [
    "DenoModuleResolver",
    "ModuleResolver",
    "ResolvedModule",
    "default_deno_dir",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ResolvedModule:
    """Where a specifier points.

    Attributes:
        raw_specifier: Specifier as written in the document
        filepath: File the specifier resolves to (may not exist)
        is_remote: True if the module comes from an http(s) URL
    """

    raw_specifier: str
    filepath: str
    is_remote: bool


class ModuleResolver(Protocol):
    """Protocol for module resolution services.

    ``resolve`` may perform I/O and is awaited; it must return a
    ResolvedModule for every specifier it can interpret, whether or not
    the target exists. It raises ModuleResolutionError (or OSError) only
    when no definitive answer is possible, in which case the existence
    check for that reference is skipped.

    Example:
        >>> class InMemoryResolver:
        ...     def __init__(self, files):
        ...         self.files = set(files)
        ...     async def resolve(self, base_directory, specifier):
        ...         path = os.path.join(base_directory, specifier)
        ...         return ResolvedModule(specifier, path, False)
        ...     def exists(self, filepath):
        ...         return filepath in self.files
    """

    async def resolve(self, base_directory: str, specifier: str) -> ResolvedModule:
        """Resolve a specifier relative to the document's directory.

        Args:
            base_directory: Directory containing the importing document
            specifier: Module specifier as written

        Returns:
            Resolution result

        Raises:
            ModuleResolutionError: If the specifier cannot be resolved
        """
        ...  # pragma: no cover  # Protocol stub - not executable

    def exists(self, filepath: str) -> bool:
        """Check whether a resolved filepath exists on the resolution target."""
        ...  # pragma: no cover  # Protocol stub - not executable


def default_deno_dir() -> Path:
    """Return $DENO_DIR, or ~/.cache/deno when it is unset."""
    configured = os.environ.get(DENO_DIR_ENV)
    if configured:
        return Path(configured)
    return Path.home() / DEFAULT_DENO_DIR


@dataclass(frozen=True, slots=True)
class DenoModuleResolver:
    """Filesystem resolver using the Deno module cache layout.

    Relative and bare specifiers are joined to the importing document's
    directory. Remote specifiers map into the dependency cache:

        https://deno.land/std/path/mod.ts
        -> $DENO_DIR/deps/https/deno.land/std/path/mod.ts

        http://localhost:4545/mod.ts
        -> $DENO_DIR/deps/http/localhost_PORT4545/mod.ts

    Attributes:
        deno_dir: Cache root (default: $DENO_DIR or ~/.cache/deno)
    """

    deno_dir: Path = field(default_factory=default_deno_dir)

    async def resolve(self, base_directory: str, specifier: str) -> ResolvedModule:
        """Resolve a specifier to a local path or a cache path.

        Raises:
            ModuleResolutionError: If a remote specifier is not a usable URL
        """
        if REMOTE_SPECIFIER_PATTERN.match(specifier):
            filepath = self._remote_cache_path(specifier)
            return ResolvedModule(raw_specifier=specifier, filepath=str(filepath), is_remote=True)

        filepath = os.path.normpath(os.path.join(base_directory, specifier))
        return ResolvedModule(raw_specifier=specifier, filepath=filepath, is_remote=False)

    def exists(self, filepath: str) -> bool:
        """True if ``filepath`` is an existing regular file."""
        return Path(filepath).is_file()

    def _remote_cache_path(self, specifier: str) -> Path:
        try:
            url = urlsplit(specifier)
            port = url.port
        except ValueError as e:
            msg = f"Invalid module URL '{specifier}': {e}"
            raise ModuleResolutionError(msg, specifier=specifier) from e

        if not url.hostname:
            msg = f"Module URL '{specifier}' has no host"
            raise ModuleResolutionError(msg, specifier=specifier)

        host = url.hostname if port is None else f"{url.hostname}_PORT{port}"
        parts = [unquote(part) for part in url.path.split("/") if part]
        if any(part in {".", ".."} for part in parts):
            msg = f"Module URL '{specifier}' escapes its host directory"
            raise ModuleResolutionError(msg, specifier=specifier)

        logger.debug("Resolved %s into module cache %s", specifier, self.deno_dir)
        return self.deno_dir.joinpath("deps", url.scheme, host, *parts)
