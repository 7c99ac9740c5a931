# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""HtmlBuilder exceptions.

Every exception here signals a programmer error. They are raised at the
point of misuse, before any malformed output reaches the buffer.
"""

from __future__ import annotations


class HtmlBuilderError(Exception):
    """Base exception for HtmlBuilder errors."""

    pass


class UsageOrderError(HtmlBuilderError):
    """Raised when builder operations are called in an invalid order."""

    pass


class AttributeOrderError(UsageOrderError):
    """Raised when an attribute is added after the start tag was terminated."""

    pass


class NodeBorrowedError(UsageOrderError):
    """Raised when a node is written while a scoped child is still open."""

    pass


class NodeClosedError(UsageOrderError):
    """Raised when a node handle is used after its element was closed."""

    pass


class UnclosedElementError(UsageOrderError):
    """Raised by finish() while a scoped element is still open."""

    pass


class BufferConsumedError(HtmlBuilderError):
    """Raised when a buffer is used after finish()."""

    pass


class InvalidMarkupError(HtmlBuilderError, ValueError):
    """Raised for tag names, attribute names or text that would break markup."""

    pass
