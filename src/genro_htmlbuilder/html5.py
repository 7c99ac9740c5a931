# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Html5Elements - per-tag convenience methods for HTML5 documents.

Every HTML5 element name is available as a method on Buffer and Node,
resolved dynamically via __getattr__. The methods are thin sugar over
open_root()/open_child(): they open the element, add keyword attributes
and optionally write text content.

Example:
    Building a page::

        buf = Buffer()
        buf.doctype()
        with buf.html(lang='en') as html:
            with html.head() as head:
                head.title('Website!')
                head.meta(charset='utf-8')
            with html.body() as body:
                body.h1("It's a website!")
                body.a('Home', href='/', class_='nav')
        page = buf.finish()

Void elements (meta, br, img, ...) are opened as VoidNode and never get
an end tag. Python keywords are spelled with a trailing underscore
(``node.del_()``).

References:
    - WHATWG HTML Standard: https://html.spec.whatwg.org/multipage/indices.html
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Callable

from .exceptions import UsageOrderError
from .markup import check_attr_name, normalize_attr_name

if TYPE_CHECKING:
    from .node import Node


HTML5_ELEMENTS: frozenset[str] = frozenset({
    "a", "abbr", "address", "area", "article", "aside", "audio",
    "b", "base", "bdi", "bdo", "blockquote", "body", "br", "button",
    "canvas", "caption", "cite", "code", "col", "colgroup",
    "data", "datalist", "dd", "del", "details", "dfn", "dialog", "div", "dl", "dt",
    "em", "embed",
    "fieldset", "figcaption", "figure", "footer", "form",
    "h1", "h2", "h3", "h4", "h5", "h6", "head", "header", "hgroup", "hr", "html",
    "i", "iframe", "img", "input", "ins",
    "kbd",
    "label", "legend", "li", "link",
    "main", "map", "mark", "menu", "meta", "meter",
    "nav", "noscript",
    "object", "ol", "optgroup", "option", "output",
    "p", "param", "picture", "pre", "progress",
    "q",
    "rp", "rt", "ruby",
    "s", "samp", "script", "search", "section", "select", "slot", "small",
    "source", "span", "strong", "style", "sub", "summary", "sup", "svg",
    "table", "tbody", "td", "template", "textarea", "tfoot", "th", "thead",
    "time", "title", "tr", "track",
    "u", "ul",
    "var", "video",
    "wbr",
})

# https://html.spec.whatwg.org/multipage/syntax.html#void-elements
HTML5_VOID_ELEMENTS: frozenset[str] = frozenset({
    "area", "base", "br", "col", "embed", "hr", "img", "input",
    "link", "meta", "param", "source", "track", "wbr",
})


def is_void_element(tag: str) -> bool:
    """True if tag is an HTML5 void element (no end tag, no content)."""
    return tag.lower() in HTML5_VOID_ELEMENTS


class Html5Elements(ABC):
    """Mixin providing a method for each HTML5 element.

    Host classes provide a ``config`` attribute (the BuilderConfig in use)
    and implement _open_element().

    A tag method checks its arguments before opening anything, so a
    rejected call leaves the document unchanged.
    """

    __slots__ = ()

    @abstractmethod
    def _open_element(self, tag: str, void: bool) -> Node:
        """Open an element with this tag and return its handle.

        Buffer opens a root, Node opens a child.
        """

    def __getattr__(self, name: str) -> Callable[..., Node]:
        """Dynamic method for any HTML5 tag.

        Args:
            name: Tag name (e.g., 'div', 'span', 'meta'), with an optional
                trailing underscore for Python keywords ('del_').

        Returns:
            Callable that opens an element with that tag.

        Raises:
            AttributeError: If name is not an HTML5 tag.
        """
        if name.startswith("_"):
            raise AttributeError(f"'{type(self).__name__}' has no attribute '{name}'")

        tag = name[:-1] if name.endswith("_") else name
        if tag in HTML5_ELEMENTS:
            return self._make_tag_method(tag)

        raise AttributeError(f"'{name}' is not a valid HTML tag")

    def _make_tag_method(self, tag: str) -> Callable[..., Node]:
        """Create the opening method for a specific tag."""
        is_void = is_void_element(tag)

        def tag_method(text: Any = None, /, **attr: Any) -> Node:
            if is_void and text is not None:
                raise UsageOrderError(f"Void element <{tag}> cannot have content")
            if self.config.validate_names:
                for key in attr:
                    check_attr_name(normalize_attr_name(key))
            node = self._open_element(tag, is_void)
            if attr:
                node.attrs(**attr)
            if text is not None:
                node.write_text(text)
            return node

        tag_method.__name__ = tag
        tag_method.__doc__ = f"Open a <{tag}> element."
        return tag_method
