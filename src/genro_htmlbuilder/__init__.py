# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Genro-HtmlBuilder - Well-formed HTML through nested handles.

A lightweight, zero-dependency library that writes HTML documents through
a tree of node handles. Handles close their own tags, so the output is
always well-formed.
"""

__version__ = "0.1.0"

from .buffer import Buffer
from .config import (
    BuilderConfig,
    builder_config_context,
    get_builder_config,
    reset_builder_config,
    set_builder_config,
)
from .exceptions import (
    AttributeOrderError,
    BufferConsumedError,
    HtmlBuilderError,
    InvalidMarkupError,
    NodeBorrowedError,
    NodeClosedError,
    UnclosedElementError,
    UsageOrderError,
)
from .html5 import HTML5_ELEMENTS, HTML5_VOID_ELEMENTS, is_void_element
from .node import CommentNode, Node, NodeState, VoidNode

__all__ = [
    # Core classes
    "Buffer",
    "Node",
    "VoidNode",
    "CommentNode",
    "NodeState",
    # Configuration
    "BuilderConfig",
    "builder_config_context",
    "get_builder_config",
    "set_builder_config",
    "reset_builder_config",
    # HTML5 vocabulary
    "HTML5_ELEMENTS",
    "HTML5_VOID_ELEMENTS",
    "is_void_element",
    # Exceptions
    "HtmlBuilderError",
    "UsageOrderError",
    "AttributeOrderError",
    "NodeBorrowedError",
    "NodeClosedError",
    "UnclosedElementError",
    "BufferConsumedError",
    "InvalidMarkupError",
]
