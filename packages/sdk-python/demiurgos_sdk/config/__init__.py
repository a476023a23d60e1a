"""
Config Module
=============

Loads JSON configuration documents and resolves their entity references.
"""

from .resolver import (
    ResolvedConfig,
    dereference_config,
    is_reference,
    load_config,
    read_json,
    resolve_config,
)

__all__ = [
    "ResolvedConfig",
    "dereference_config",
    "is_reference",
    "load_config",
    "read_json",
    "resolve_config",
]
