"""Flatten Jira rich-text (Atlassian Document Format) descriptions to plain text."""

from __future__ import annotations

from typing import Any

BULLET = "• "


def flatten_description(node: Any) -> str:
    """Convert a rich-text node tree into plain text.

    Depth-first walk over typed nodes:

    - ``text``: its text, verbatim
    - ``paragraph``: children, then a line break
    - ``bulletList``: a line break, then children
    - ``listItem``: a bullet, children, then a line break

    Any other node type contributes only its children. A list is treated
    as a sequence of sibling nodes.

    Args:
        node: A document node (dict), or a list of nodes

    Returns:
        Flattened text
    """
    if isinstance(node, list):
        return "".join(flatten_description(child) for child in node)
    if not isinstance(node, dict):
        return ""

    node_type = node.get("type")
    parts: list[str] = []

    if node_type == "text" and node.get("text"):
        parts.append(str(node["text"]))
    elif node_type == "bulletList":
        parts.append("\n")
    elif node_type == "listItem":
        parts.append(BULLET)

    content = node.get("content")
    for child in content if isinstance(content, list) else []:
        parts.append(flatten_description(child))

    if node_type in ("paragraph", "listItem"):
        parts.append("\n")

    return "".join(parts)


def description_to_text(description: Any) -> str:
    """Flatten a description field, whatever shape the tracker returned."""
    if isinstance(description, (dict, list)):
        return flatten_description(description)
    return str(description or "")
