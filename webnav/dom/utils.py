import re

from webnav.config.constants import BLOCK_TAGS
from webnav.dom.nodes import Element, Text

_SPACES = re.compile(r"\s+")
_NEWLINES = re.compile(r" *\n[ \n]*")

# Marks the end of a block element while collecting text
_BLOCK_END = object()


def tree_to_list(tree, list):
    """Append tree and all its descendants to list, in document order."""
    stack = [tree]
    while stack:
        node = stack.pop()
        list.append(node)
        stack.extend(reversed(node.children))
    return list


def ancestors(node):
    """Parents of node, nearest first."""
    out = []
    current = node.parent
    while current is not None:
        out.append(current)
        current = current.parent
    return out


def element_children(node):
    return [child for child in node.children if isinstance(child, Element)]


def _collect_text(node, parts):
    stack = [node]
    while stack:
        item = stack.pop()
        if item is _BLOCK_END:
            parts.append("\n")
        elif isinstance(item, Text):
            parts.append(_SPACES.sub(" ", item.text))
        elif isinstance(item, Element) and item.tag in ("script", "style"):
            continue
        else:
            if isinstance(item, Element) and item.tag in BLOCK_TAGS:
                parts.append("\n")
                stack.append(_BLOCK_END)
            stack.extend(reversed(item.children))


def as_text(node):
    """Render the text of node and its descendants the way a reader sees it.

    Runs of whitespace collapse to one space, block elements start on a new
    line, and leading/trailing whitespace is dropped.
    """
    parts = []
    _collect_text(node, parts)
    return _NEWLINES.sub("\n", "".join(parts)).strip()
