"""
render_html.py  ––  DOM subtree -> fixed-width text
---------------------------------------------------
Walks a BeautifulSoup subtree in document order and writes a flat text
stream:

    text node               text with whitespace runs collapsed
    <br>                    "\\n"
    <h2>                    "\\n# "
    previous sibling <h2>   one extra "\\n" after the node's own text

Any other tag contributes nothing itself; its children are still visited.
The stream is then cleaned up by text_normalize.normalize_text.
"""

from __future__ import annotations

import logging
from typing import Iterable, Union

from bs4.element import NavigableString, PageElement, PreformattedString, Tag

from text_normalize import WRAP_WIDTH, collapse_whitespace, normalize_text

logger = logging.getLogger(__name__)

LINE_BREAK_TAG = "br"
HEADING_TAG    = "h2"
HEADING_PREFIX = "\n# "

Nodes = Union[PageElement, Iterable[PageElement]]


# ---------- node rules -------------------------------------------------------
def is_text_node(node: PageElement) -> bool:
    # comments, doctypes, CDATA and processing instructions are not text
    return isinstance(node, NavigableString) and not isinstance(
        node, PreformattedString
    )


def is_tag(node: PageElement | None, name: str) -> bool:
    return isinstance(node, Tag) and node.name == name


def node_text(node: PageElement) -> str:
    """What a single node writes to the stream, children excluded."""
    out = ""
    if is_text_node(node):
        out += collapse_whitespace(str(node))
    if is_tag(node, LINE_BREAK_TAG):
        out += "\n"
    if is_tag(node, HEADING_TAG):
        out += HEADING_PREFIX
    if is_tag(node.previous_sibling, HEADING_TAG):
        out += "\n"
    return out


# ---------- walk -------------------------------------------------------------
def iter_preorder(nodes: Nodes) -> Iterable[PageElement]:
    """Depth-first, pre-order, without recursion."""
    if isinstance(nodes, PageElement):
        nodes = [nodes]
    stack = list(reversed(list(nodes)))
    while stack:
        node = stack.pop()
        yield node
        if isinstance(node, Tag):
            stack.extend(reversed(node.contents))


def render_raw(nodes: Nodes) -> str:
    return "".join(node_text(n) for n in iter_preorder(nodes))


def render_html(nodes: Nodes, width: int = WRAP_WIDTH) -> str:
    """Render one node, or several root nodes, to normalized text."""
    raw = render_raw(nodes)
    logger.debug("rendered %d raw characters", len(raw))
    return normalize_text(raw, width)
