# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Markup helpers: name validation, escaping and attribute formatting.

Escaping policy:
    - Element text escapes ``&``, ``<`` and ``>``.
    - Attribute values additionally escape ``"`` and ``'``.
    - Comment text is written as is, but may not contain ``--`` nor
      start with ``>`` or ``->``.
"""

from __future__ import annotations

import html
import re
from typing import Any

from .exceptions import InvalidMarkupError

# Element names: ASCII letter first, then letters, digits and the
# separators used by custom elements and namespaced tags (my-widget, svg:g).
_TAG_PATTERN = re.compile(r'^[A-Za-z][A-Za-z0-9_.:-]*$')

# Attribute names: anything except whitespace, quotes, '>', '/', '=' and controls.
_ATTR_PATTERN = re.compile(r'^[^\s"\'>/=\x00-\x1f\x7f]+$')


def check_tag_name(tag: str) -> str:
    """Return tag unchanged, or raise InvalidMarkupError if it is malformed."""
    if not isinstance(tag, str) or not _TAG_PATTERN.match(tag):
        raise InvalidMarkupError(f"Invalid tag name: {tag!r}")
    return tag


def check_attr_name(name: str) -> str:
    """Return name unchanged, or raise InvalidMarkupError if it is malformed."""
    if not isinstance(name, str) or not _ATTR_PATTERN.match(name):
        raise InvalidMarkupError(f"Invalid attribute name: {name!r}")
    return name


def normalize_attr_name(name: str) -> str:
    """Turn a Python keyword argument into an HTML attribute name.

    A trailing underscore is dropped (so reserved words can be used) and
    the remaining underscores become hyphens.

    Examples:
        >>> normalize_attr_name('class_')
        'class'
        >>> normalize_attr_name('data_user_id')
        'data-user-id'
        >>> normalize_attr_name('http_equiv')
        'http-equiv'
    """
    if name.endswith('_') and len(name) > 1:
        name = name[:-1]
    return name.replace('_', '-')


def escape_text(text: Any) -> str:
    """Escape element content."""
    return html.escape(str(text), quote=False)


def escape_attr(value: Any) -> str:
    """Escape an attribute value for use inside double quotes."""
    return html.escape(str(value), quote=True)


def format_attr(name: str, value: Any = None) -> str:
    """Format one attribute as it appears inside a start tag.

    Args:
        name: Attribute name, written as is.
        value: Attribute value. None or True gives a bare boolean
            attribute, False gives an empty string (attribute omitted).

    Returns:
        The attribute with its leading space, e.g. ``' lang="en"'``.

    Examples:
        >>> format_attr('lang', 'en')
        ' lang="en"'
        >>> format_attr('disabled')
        ' disabled'
        >>> format_attr('hidden', False)
        ''
    """
    if value is False:
        return ''
    if value is None or value is True:
        return f' {name}'
    return f' {name}="{escape_attr(value)}"'


def check_comment_text(text: str, previous: str = '') -> str:
    """Return text unchanged, or raise if it would end the comment early.

    Args:
        text: Text about to be written inside the comment.
        previous: Comment text already written ('' at the comment start).
    """
    if not previous and text.startswith(('>', '->')):
        raise InvalidMarkupError(
            f"Comment text may not start with '>' or '->': {text!r}"
        )
    if '--' in previous[-1:] + text:
        raise InvalidMarkupError(f"Comment text may not contain '--': {text!r}")
    return text
