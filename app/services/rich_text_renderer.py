"""
Render a Contentful rich-text document tree into HTML.

The tree arrives already parsed from the content service; rendering is a
lookup from node kind to a rule that receives the node and its rendered
children. Rules missing from a caller's table fall back to DEFAULT_RULES,
and node kinds nobody knows about (embedded entries and assets included)
render their children only.
"""

import html
from enum import Enum
from typing import Any, Callable, Dict, Mapping, Optional

RenderRule = Callable[[dict, str], str]


class BlockKind(str, Enum):
    DOCUMENT = "document"
    PARAGRAPH = "paragraph"
    HEADING_1 = "heading-1"
    HEADING_2 = "heading-2"
    HEADING_3 = "heading-3"
    HEADING_4 = "heading-4"
    HEADING_5 = "heading-5"
    HEADING_6 = "heading-6"
    UL_LIST = "unordered-list"
    OL_LIST = "ordered-list"
    LIST_ITEM = "list-item"
    QUOTE = "blockquote"
    HR = "hr"
    HYPERLINK = "hyperlink"
    ENTRY_HYPERLINK = "entry-hyperlink"
    ASSET_HYPERLINK = "asset-hyperlink"
    TABLE = "table"
    TABLE_ROW = "table-row"
    TABLE_CELL = "table-cell"
    TABLE_HEADER_CELL = "table-header-cell"
    TEXT = "text"


MARK_TAGS: Dict[str, str] = {
    "bold": "strong",
    "italic": "em",
    "underline": "u",
    "code": "code",
    "superscript": "sup",
    "subscript": "sub",
    "strikethrough": "s",
}

FORBIDDEN_PROTOCOLS = ("javascript:", "data:", "vbscript:")


def safe_href(uri: Any) -> str:
    if not isinstance(uri, str):
        return "#"
    # browsers ignore whitespace and control chars inside the scheme
    compact = "".join(ch for ch in uri if ch.isprintable() and not ch.isspace())
    if compact.lower().startswith(FORBIDDEN_PROTOCOLS):
        return "#"
    return uri.strip()


def external_link(node: dict, children: str, css_class: Optional[str] = None) -> str:
    """Links always open in a new context and pass no referrer or opener."""
    href = safe_href((node.get("data") or {}).get("uri"))
    class_attr = f' class="{html.escape(css_class)}"' if css_class else ""
    return (
        f'<a href="{html.escape(href)}"{class_attr} '
        f'target="_blank" rel="noopener noreferrer">{children}</a>'
    )


def asset_link(node: dict, children: str) -> str:
    """Link to the file of the asset in data.target."""
    target = (node.get("data") or {}).get("target")
    fields = target.get("fields") if isinstance(target, dict) else None
    file = fields.get("file") if isinstance(fields, dict) else None
    url = file.get("url") if isinstance(file, dict) else None
    if not isinstance(url, str) or not url:
        return children
    if url.startswith("//"):
        url = f"https:{url}"
    return external_link({"data": {"uri": url}}, children)


def _wrap(tag: str, css_class: Optional[str] = None) -> RenderRule:
    class_attr = f' class="{css_class}"' if css_class else ""

    def rule(node: dict, children: str) -> str:
        return f"<{tag}{class_attr}>{children}</{tag}>"

    return rule


DEFAULT_RULES: Dict[BlockKind, RenderRule] = {
    BlockKind.DOCUMENT: lambda node, children: children,
    BlockKind.PARAGRAPH: _wrap("p"),
    BlockKind.HEADING_1: _wrap("h1"),
    BlockKind.HEADING_2: _wrap("h2"),
    BlockKind.HEADING_3: _wrap("h3"),
    BlockKind.HEADING_4: _wrap("h4"),
    BlockKind.HEADING_5: _wrap("h5"),
    BlockKind.HEADING_6: _wrap("h6"),
    BlockKind.UL_LIST: _wrap("ul"),
    BlockKind.OL_LIST: _wrap("ol"),
    BlockKind.LIST_ITEM: _wrap("li"),
    BlockKind.QUOTE: _wrap("blockquote"),
    BlockKind.HR: lambda node, children: "<hr/>",
    BlockKind.HYPERLINK: external_link,
    BlockKind.ENTRY_HYPERLINK: _wrap("span"),
    BlockKind.ASSET_HYPERLINK: asset_link,
    BlockKind.TABLE: lambda node, children: f"<table><tbody>{children}</tbody></table>",
    BlockKind.TABLE_ROW: _wrap("tr"),
    BlockKind.TABLE_CELL: _wrap("td"),
    BlockKind.TABLE_HEADER_CELL: _wrap("th"),
}

# Markup used on the article page
ARTICLE_RULES: Dict[BlockKind, RenderRule] = {
    BlockKind.PARAGRAPH: _wrap("p", "mb-4"),
    BlockKind.HEADING_1: _wrap("h1", "text-3xl font-bold mt-8 mb-4"),
    BlockKind.HEADING_2: _wrap("h2", "text-2xl font-bold mt-8 mb-4"),
    BlockKind.HEADING_3: _wrap("h3", "text-xl font-bold mt-6 mb-3"),
    BlockKind.UL_LIST: _wrap("ul", "list-disc pl-6 mb-4"),
    BlockKind.OL_LIST: _wrap("ol", "list-decimal pl-6 mb-4"),
    BlockKind.LIST_ITEM: _wrap("li", "mb-1"),
    BlockKind.QUOTE: _wrap("blockquote", "border-l-4 border-primary pl-4 italic my-4"),
    BlockKind.HYPERLINK: lambda node, children: external_link(
        node, children, "text-primary hover:underline"
    ),
}


def render_document(
    document: Any, rules: Optional[Mapping[str, RenderRule]] = None
) -> str:
    if not isinstance(document, dict):
        return ""
    table = {**DEFAULT_RULES, **(rules or {})}
    return _render_node(document, table)


def render_text(node: dict) -> str:
    out = html.escape(str(node.get("value") or ""))
    for mark in node.get("marks") or []:
        tag = MARK_TAGS.get((mark or {}).get("type"))
        if tag:
            out = f"<{tag}>{out}</{tag}>"
    return out


def _render_node(node: Any, table: Mapping[str, RenderRule]) -> str:
    if not isinstance(node, dict):
        return ""

    node_type = node.get("nodeType")
    if node_type == BlockKind.TEXT:
        return render_text(node)

    children = "".join(_render_node(child, table) for child in node.get("content") or [])
    rule = table.get(node_type) if isinstance(node_type, str) else None
    if rule is None:
        return children
    return rule(node, children)


def document_plain_text(document: Any) -> str:
    """Concatenated text of every text node, blocks separated by spaces."""
    if not isinstance(document, dict):
        return ""
    if document.get("nodeType") == BlockKind.TEXT:
        return str(document.get("value") or "")
    parts = (document_plain_text(child) for child in document.get("content") or [])
    return " ".join(part for part in parts if part)
