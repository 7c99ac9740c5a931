# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Output configuration for HtmlBuilder.

A BuilderConfig is fixed when a Buffer is created. Buffers created without
an explicit config take the current context default, which is held in a
ContextVar so that threads and asyncio tasks see independent defaults.

Usage:
    buf = Buffer(BuilderConfig(pretty=True))

    # Or change the default for a block of code
    with builder_config_context(BuilderConfig(pretty=True)):
        buf = Buffer()
"""

from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, fields
from typing import Any, Iterator


@dataclass(frozen=True, slots=True)
class BuilderConfig:
    """Immutable output configuration.

    Attributes:
        pretty: Break lines after start tags and indent tag lines by depth.
        indent: Indentation unit used in pretty mode.
        doctype: Name written by doctype(), as in ``<!DOCTYPE html>``.
        validate_names: Reject tag and attribute names that would
            produce malformed markup.
    """

    pretty: bool = False
    indent: str = " "
    doctype: str = "html"
    validate_names: bool = True

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> BuilderConfig:
        """Create a BuilderConfig from a dictionary.

        Unknown keys are ignored, so a larger application config can be
        passed through unchanged.

        Example:
            >>> BuilderConfig.from_dict({"pretty": True, "theme": "dark"}).pretty
            True
        """
        valid = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in config_dict.items() if k in valid})


_DEFAULT_CONFIG = BuilderConfig()

_builder_config: ContextVar[BuilderConfig] = ContextVar(
    "builder_config",
    default=_DEFAULT_CONFIG,
)


def get_builder_config() -> BuilderConfig:
    """Return the default BuilderConfig for the current context."""
    return _builder_config.get()


def set_builder_config(config: BuilderConfig) -> None:
    """Set the default BuilderConfig for the current context."""
    _builder_config.set(config)


def reset_builder_config() -> None:
    """Restore the module default BuilderConfig."""
    _builder_config.set(_DEFAULT_CONFIG)


@contextmanager
def builder_config_context(config: BuilderConfig) -> Iterator[BuilderConfig]:
    """Temporarily replace the default BuilderConfig.

    The previous default is restored even if the block raises.

    Example:
        >>> with builder_config_context(BuilderConfig(pretty=True)):
        ...     Buffer().config.pretty
        True
    """
    token = _builder_config.set(config)
    try:
        yield config
    finally:
        _builder_config.reset(token)


__all__ = [
    "BuilderConfig",
    "get_builder_config",
    "set_builder_config",
    "reset_builder_config",
    "builder_config_context",
]
