# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Logging helpers for HtmlBuilder.

Example:
    >>> from genro_htmlbuilder.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Opening <%s>", "div")
"""

from __future__ import annotations

import logging

_ROOT = "genro_htmlbuilder"


def get_logger(name: str) -> logging.Logger:
    """Get a logger namespaced under ``genro_htmlbuilder``.

    Args:
        name: Logger name (typically __name__).

    Returns:
        logging.Logger instance.

    Example:
        >>> get_logger("mymodule").name
        'genro_htmlbuilder.mymodule'
    """
    if not (name == _ROOT or name.startswith(f"{_ROOT}.")):
        name = f"{_ROOT}.{name}"
    return logging.getLogger(name)
