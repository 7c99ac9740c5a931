# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Buffer - the single output destination of an HTML document.

This module provides the Buffer class. A Buffer accumulates markup in a
list of parts joined once by finish(), and keeps the chain of currently
open Node handles, outermost first. A handle's depth is its index in the
chain, and only the last handle in the chain may write.

Key Features:
    - **Well-formed by construction**: end tags are emitted by the handles,
      in reverse order of opening
    - **Deferred ``>``**: a start tag stays open for attributes until the
      first child or text is written
    - **Fail fast**: misuse raises before anything malformed is written
    - **Pretty mode**: optional line breaks and indentation by depth

Example:
    Basic usage::

        buf = Buffer()
        html = buf.html(lang='en')
        html.head().title('Title!')
        html.body().h1('Header!')
        page = buf.finish()
        # '<html lang="en"><head><title>Title!</title></head>'
        # '<body><h1>Header!</h1></body></html>'

    With scoped handles::

        buf = Buffer(BuilderConfig(pretty=True))
        with buf.open_root('ul') as ul:
            for i in range(3):
                ul.li(f'Item {i}')
        page = buf.finish()
"""

from __future__ import annotations

from .config import BuilderConfig, get_builder_config
from .exceptions import (
    BufferConsumedError,
    NodeBorrowedError,
    UnclosedElementError,
)
from .html5 import Html5Elements
from .logger import get_logger
from .markup import check_comment_text, check_tag_name, escape_text
from .node import CommentNode, Node, NodeState, VoidNode

logger = get_logger(__name__)


class Buffer(Html5Elements):
    """The output buffer shared by all handles of one document.

    Buffer provides:
    - open_root(tag): Open a top-level element
    - raw_write(text) / write_text(text): Top-level content
    - doctype() / comment(text): Document preamble
    - finish(): Close everything and return the text

    Every HTML5 tag is also available as a method opening a root
    element (``buf.html(lang='en')``).

    Attributes:
        config: The BuilderConfig fixed at creation.

    Example:
        >>> buf = Buffer()
        >>> buf.open_root('div').attr('id', 'main')
        >>> buf.finish()
        '<div id="main"></div>'
    """

    __slots__ = ('config', '_parts', '_open_nodes', '_pending', '_consumed', '_line_start')

    def __init__(self, config: BuilderConfig | None = None) -> None:
        """Initialize an empty Buffer.

        Args:
            config: Output configuration. If None, the current context
                default is used (see builder_config_context).
        """
        self.config = config if config is not None else get_builder_config()
        self._parts: list[str] = []
        self._open_nodes: list[Node] = []
        self._pending: Node | None = None
        self._consumed = False
        self._line_start = True

    @classmethod
    def create(cls, config: BuilderConfig | None = None) -> Buffer:
        """Return a new empty Buffer."""
        return cls(config)

    def __repr__(self) -> str:
        return f"Buffer(open={list(self.open_tags)}, consumed={self._consumed})"

    # ==================== Properties ====================

    @property
    def depth(self) -> int:
        """Number of currently open elements."""
        return len(self._open_nodes)

    @property
    def open_tags(self) -> tuple[str, ...]:
        """Tags of the currently open elements, outermost first."""
        return tuple(node.tag for node in self._open_nodes)

    @property
    def pending(self) -> Node | None:
        """The node whose start tag still waits for its ``>``, if any."""
        return self._pending

    @property
    def consumed(self) -> bool:
        """True after finish()."""
        return self._consumed

    # ==================== Top-level writes ====================

    def open_root(self, tag: str, void: bool = False) -> Node:
        """Open a top-level element.

        Any element still open at the top level is closed first, so
        several roots can be written one after the other.

        Args:
            tag: The element name.
            void: Open a VoidNode (no end tag, no content).

        Returns:
            The root handle.

        Raises:
            NodeBorrowedError: If an element is open in a ``with`` block.
        """
        self._check_usable()
        if self.config.validate_names:
            check_tag_name(tag)
        self._release(0)
        node_class = VoidNode if void else Node
        node = node_class(self, tag)
        self._open(node)
        return node

    def raw_write(self, text: str) -> None:
        """Append text verbatim at the top level of the document."""
        self._check_usable()
        self._release(0)
        self._append(str(text))

    def write_text(self, text: str) -> None:
        """Append escaped text at the top level of the document."""
        self._check_usable()
        self._release(0)
        self._append(escape_text(text))

    def doctype(self) -> None:
        """Write the document type declaration, e.g. ``<!DOCTYPE html>``."""
        newline = "\n" if self.config.pretty else ""
        self.raw_write(f"<!DOCTYPE {self.config.doctype}>{newline}")

    def comment(self, text: str | None = None) -> CommentNode:
        """Open a top-level ``<!-- -->`` comment."""
        self._check_usable()
        if text is not None:
            check_comment_text(str(text))
        self._release(0)
        node = CommentNode(self)
        self._open(node)
        if text is not None:
            node.write_text(text)
        return node

    def _open_element(self, tag: str, void: bool) -> Node:
        return self.open_root(tag, void=void)

    def finish(self) -> str:
        """Close all open elements and return the document.

        The buffer is consumed: any later use raises BufferConsumedError.

        Returns:
            The complete document text.

        Raises:
            UnclosedElementError: If an element is still open in a ``with``
                block. Nothing is written and the buffer stays usable.
        """
        self._check_usable()
        scoped = [node.tag for node in self._open_nodes if node.scoped]
        if scoped:
            raise UnclosedElementError(
                f"Cannot finish while {', '.join(f'<{t}>' for t in scoped)} "
                "is open in a with block"
            )
        self._release(0)
        self._consumed = True
        text = "".join(self._parts)
        self._parts = []
        logger.debug("Finished document: %d characters", len(text))
        return text

    # ==================== Internals used by Node ====================

    def _check_usable(self) -> None:
        if self._consumed:
            raise BufferConsumedError("Buffer already finished")

    def _append(self, text: str) -> None:
        if text:
            self._parts.append(text)
            self._line_start = text.endswith("\n")

    def _break_line(self, depth: int) -> None:
        """In pretty mode, start a new line indented to depth."""
        if not self._line_start:
            self._append("\n")
        self._append(self.config.indent * depth)

    def _open(self, node: Node) -> None:
        if self.config.pretty:
            self._break_line(node.depth)
        self._append(node.start_markup())
        self._open_nodes.append(node)
        if node.state is NodeState.OPEN_UNTERMINATED:
            self._pending = node

    def _terminate(self, node: Node) -> None:
        self._append(">\n" if self.config.pretty else ">")
        node._state = NodeState.OPEN_TERMINATED
        self._pending = None

    def _release(self, depth: int, force: bool = False) -> None:
        """Close every open node at index depth or deeper.

        Args:
            depth: Index of the outermost node to close.
            force: Close scoped nodes too, instead of raising.

        Raises:
            NodeBorrowedError: If one of them is scoped and force is
                False. Nothing is written in that case.
        """
        deeper = self._open_nodes[depth:]
        if not deeper:
            return
        for node in deeper:
            if node.scoped and not force:
                owner = (
                    f"<{self._open_nodes[depth - 1].tag}>" if depth
                    else "the top level"
                )
                raise NodeBorrowedError(
                    f"Cannot write to {owner} while <{node.tag}> "
                    "is open in a with block"
                )
        logger.debug("Closing %s implicitly", ", ".join(f"<{n.tag}>" for n in deeper))
        for node in deeper:
            node._scoped = False
        while len(self._open_nodes) > depth:
            self._close_innermost()

    def _close_innermost(self) -> None:
        node = self._open_nodes.pop()
        if node.state is NodeState.OPEN_UNTERMINATED:
            self._terminate(node)
        end = node.end_markup()
        if end:
            pretty = self.config.pretty
            if pretty and node._end_on_own_line:
                self._break_line(node.depth)
            self._append(f"{end}\n" if pretty else end)
        node._state = NodeState.CLOSED
