"""Module resolution: protocol and Deno cache implementation.

Python 3.13+.
"""

from importcheck.resolution.resolver import (
    DenoModuleResolver,
    ModuleResolver,
    ResolvedModule,
    default_deno_dir,
)

__all__ = [
    "DenoModuleResolver",
    "ModuleResolver",
    "ResolvedModule",
    "default_deno_dir",
]
