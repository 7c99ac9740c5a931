# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Node handles: one handle per currently open element.

A handle never owns the output, it borrows the Buffer it was created from.
Only the innermost open handle may write. Before every write a handle
claims the buffer:

- open descendants that are scoped by a ``with`` block make the claim
  fail with NodeBorrowedError;
- other open descendants are closed, innermost first, and their handles
  become unusable.

The second rule lets fluent chains like ``ul.li().a(href='/').write_text('x')``
work without a ``with`` block: a child stays open until its parent (or any
ancestor) writes again.

Each handle moves through three states, never backwards::

    OPEN_UNTERMINATED -> OPEN_TERMINATED -> CLOSED
       '<div'              '<div ...>'        '...</div>'
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any, cast

from .exceptions import (
    AttributeOrderError,
    NodeClosedError,
    UsageOrderError,
)
from .html5 import Html5Elements
from .markup import (
    check_attr_name,
    check_comment_text,
    check_tag_name,
    escape_text,
    format_attr,
    normalize_attr_name,
)

if TYPE_CHECKING:
    from types import TracebackType

    from .buffer import Buffer
    from .config import BuilderConfig


class NodeState(Enum):
    """Lifecycle of a node handle."""

    OPEN_UNTERMINATED = "open_unterminated"
    OPEN_TERMINATED = "open_terminated"
    CLOSED = "closed"


class Node(Html5Elements):
    """Handle for one open HTML element.

    Each node has:
    - tag: The element name it will close
    - parent: The handle it was opened from (None for a root)
    - depth: Its position in the buffer's chain of open elements
    - state: A NodeState

    Nodes are created by Buffer.open_root() and Node.open_child(), or by
    the per-tag methods (``node.div()``), never directly.

    Used as a context manager, the node is closed when the block exits,
    whatever the exit path, and its parent refuses writes until then:

        >>> buf = Buffer()
        >>> with buf.open_root('ul') as ul:
        ...     with ul.open_child('li') as li:
        ...         li.write_text('one')
        >>> buf.finish()
        '<ul><li>one</li></ul>'
    """

    __slots__ = ('tag', 'parent', 'depth', '_buffer', '_state', '_scoped')

    # Content and children are allowed between the tags.
    _accepts_content = True
    _accepts_attributes = True
    # In pretty mode the end tag starts on its own indented line.
    _end_on_own_line = True

    def __init__(
        self,
        buffer: Buffer,
        tag: str,
        parent: Node | None = None,
        state: NodeState = NodeState.OPEN_UNTERMINATED,
    ) -> None:
        """Initialize a Node.

        Args:
            buffer: The Buffer this node writes into.
            tag: The element name.
            parent: The node this one was opened from, None for a root.
            state: Initial state.
        """
        self.tag = tag
        self.parent = parent
        self.depth = 0 if parent is None else parent.depth + 1
        self._buffer = buffer
        self._state = state
        self._scoped = False

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.tag!r}, depth={self.depth}, state={self._state.name})"

    @property
    def state(self) -> NodeState:
        """Current NodeState."""
        return self._state

    @property
    def is_open(self) -> bool:
        """True until the end tag has been written."""
        return self._state is not NodeState.CLOSED

    @property
    def scoped(self) -> bool:
        """True while the node is the target of a ``with`` block."""
        return self._scoped

    @property
    def buffer(self) -> Buffer:
        """The Buffer this node writes into."""
        return self._buffer

    @property
    def config(self) -> BuilderConfig:
        """The BuilderConfig of the buffer."""
        return self._buffer.config

    # ==================== Markup ====================

    def start_markup(self) -> str:
        return f"<{self.tag}"

    def end_markup(self) -> str:
        return f"</{self.tag}>"

    # ==================== Attributes ====================

    def attr(self, key: str, value: Any = None) -> Node:
        """Add an attribute to the start tag.

        Duplicate keys are written in call order, never merged.

        Args:
            key: Attribute name, written as is.
            value: Attribute value. None or True writes a bare boolean
                attribute, False writes nothing.

        Returns:
            self, for chaining.

        Raises:
            AttributeOrderError: If a child or text has already been written.

        Example:
            >>> buf.open_root('input').attr('type', 'checkbox').attr('checked')
        """
        self._check_open()
        if not self._accepts_attributes:
            raise AttributeOrderError(f"<{self.tag}> does not take attributes")
        if self._state is not NodeState.OPEN_UNTERMINATED:
            raise AttributeOrderError(
                f"Cannot add attribute '{key}' to <{self.tag}>: "
                "start tag already terminated by content"
            )
        if self._buffer.config.validate_names:
            check_attr_name(key)
        self._buffer._append(format_attr(key, value))
        return self

    def attrs(self, _attr: dict[str, Any] | None = None, **kwargs: Any) -> Node:
        """Add several attributes to the start tag.

        Args:
            _attr: Attributes whose names are written as is.
            **kwargs: Attributes whose names are normalized first
                (``class_`` -> ``class``, ``data_id`` -> ``data-id``).

        Returns:
            self, for chaining.
        """
        items = list(_attr.items()) if _attr else []
        items.extend((normalize_attr_name(k), v) for k, v in kwargs.items())
        if self._buffer.config.validate_names:
            for key, _ in items:
                check_attr_name(key)
        for key, value in items:
            self.attr(key, value)
        return self

    # ==================== Children ====================

    def open_child(self, tag: str, void: bool = False) -> Node:
        """Open a child element.

        Terminates this node's start tag if needed, then writes ``<tag``.
        Until the child is closed this node can only write by closing it,
        and not at all if the child is inside a ``with`` block.

        Args:
            tag: The child element name.
            void: Open a VoidNode (no end tag, no content).

        Returns:
            The child's handle.
        """
        self._check_open()
        if self._buffer.config.validate_names:
            check_tag_name(tag)
        node_class = VoidNode if void else Node
        return self._spawn(node_class(self._buffer, tag, parent=self))

    def void_child(self, tag: str) -> VoidNode:
        """Open a void child element, e.g. ``<img src="...">``."""
        return cast(VoidNode, self.open_child(tag, void=True))

    def comment(self, text: str | None = None) -> CommentNode:
        """Open a ``<!-- -->`` comment inside this element.

        Args:
            text: Optional comment text, more can be added with write_text().
        """
        self._check_open()
        if text is not None:
            check_comment_text(str(text))
        node = self._spawn(CommentNode(self._buffer, parent=self))
        if text is not None:
            node.write_text(text)
        return node

    def _open_element(self, tag: str, void: bool) -> Node:
        return self.open_child(tag, void=void)

    def _spawn(self, child: Node) -> Node:
        if not self._accepts_content:
            raise UsageOrderError(f"<{self.tag}> cannot have child elements")
        self._claim()
        self._terminate()
        self._buffer._open(child)
        return child

    # ==================== Content ====================

    def write_text(self, content: Any) -> Node:
        """Write escaped text content.

        ``&``, ``<`` and ``>`` are escaped. Non-string values are
        converted with str().

        Returns:
            self, for chaining.
        """
        self._check_open()
        self._write(escape_text(content))
        return self

    def write_raw(self, markup: str) -> Node:
        """Write trusted markup verbatim.

        The markup is not checked: it must be well-formed on its own.

        Returns:
            self, for chaining.
        """
        self._check_open()
        self._write(str(markup))
        return self

    def _write(self, text: str) -> None:
        if not self._accepts_content:
            raise UsageOrderError(f"Void element <{self.tag}> cannot have content")
        self._claim()
        self._terminate()
        self._buffer._append(text)

    # ==================== Lifecycle ====================

    def _check_open(self) -> None:
        self._buffer._check_usable()
        if self._state is NodeState.CLOSED:
            raise NodeClosedError(f"<{self.tag}> is already closed")

    def _claim(self) -> None:
        """Take the write position, closing unscoped descendants."""
        self._buffer._release(self.depth + 1)

    def _terminate(self) -> None:
        if self._state is NodeState.OPEN_UNTERMINATED:
            self._buffer._terminate(self)

    def _close(self, force: bool = False) -> None:
        self._check_open()
        self._buffer._release(self.depth + 1, force=force)
        self._buffer._close_innermost()

    def __enter__(self) -> Node:
        self._check_open()
        if self._scoped:
            raise UsageOrderError(f"<{self.tag}> is already open in a with block")
        self._scoped = True
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        """Write the end tag.

        A descendant still open in a with block raises NodeBorrowedError,
        unless an exception is already propagating: then the descendant is
        closed too, so the buffer stays usable and the original exception
        reaches the caller.
        """
        self._scoped = False
        self._close(force=exc_type is not None)


class VoidNode(Node):
    """Handle for a void element such as ``<meta>`` or ``<br>``.

    Takes attributes but no content and no end tag. The ``>`` is written
    when the next write happens anywhere in the document.
    """

    __slots__ = ()

    _accepts_content = False

    def end_markup(self) -> str:
        return ""


class CommentNode(Node):
    """Handle for an HTML comment, ``<!-- text -->``.

    Text is written as is; it may not contain ``--``. Comments take no
    attributes and no child elements.
    """

    __slots__ = ('_tail',)

    _accepts_attributes = False
    _end_on_own_line = False

    def __init__(self, buffer: Buffer, parent: Node | None = None) -> None:
        super().__init__(buffer, "!--", parent=parent, state=NodeState.OPEN_TERMINATED)
        self._tail = ""

    def start_markup(self) -> str:
        return "<!--"

    def end_markup(self) -> str:
        return "-->"

    def open_child(self, tag: str, void: bool = False) -> Node:
        self._check_open()
        raise UsageOrderError("Comments cannot have child elements")

    def comment(self, text: str | None = None) -> CommentNode:
        self._check_open()
        raise UsageOrderError("Comments cannot be nested")

    def write_text(self, content: Any) -> CommentNode:
        """Write comment text, as is."""
        self._check_open()
        text = check_comment_text(str(content), self._tail)
        self._write(text)
        if text:
            self._tail = text[-1]
        return self

    write_raw = write_text
