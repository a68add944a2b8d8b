"""Parse Markdown and normalize to canonical AST tokens.

Two sources are supported:

* raw Markdown, parsed with mistune v3's AST renderer;
* an mdast tree (the JSON produced by remark/unified), for callers that
  already parse Markdown elsewhere.

Both are mapped onto the same canonical token set consumed by
:func:`~slackify.converter.block_builder.build_blocks`.

Canonical block tokens:
    heading, paragraph, block_quote, list, list_item, task_list_item,
    block_code, thematic_break, html_block

Canonical inline tokens:
    text, strong, emphasis, codespan, strikethrough, link,
    link_reference, image, image_reference, linebreak, html_inline

Token kinds outside these sets are kept with their original type (and
no payload) so the block builder can report them before skipping them.
"""

from __future__ import annotations

from typing import Any

import mistune

from slackify.config import DEFAULT_PLUGINS
from slackify.errors import SlackifyInputError

# ---------------------------------------------------------------------------
# mistune-to-canonical type mapping
# ---------------------------------------------------------------------------

_MISTUNE_TYPE_MAP: dict[str, str] = {
    "heading": "heading",
    "paragraph": "paragraph",
    "block_quote": "block_quote",
    "list": "list",
    "list_item": "list_item",
    "task_list_item": "task_list_item",
    "block_code": "block_code",
    "thematic_break": "thematic_break",
    "block_html": "html_block",
    # Tight list items wrap their inline content in block_text
    "block_text": "paragraph",
    "text": "text",
    "strong": "strong",
    "emphasis": "emphasis",
    "codespan": "codespan",
    "strikethrough": "strikethrough",
    "link": "link",
    "image": "image",
    "linebreak": "linebreak",
    "inline_html": "html_inline",
}

_SKIP_TYPES: frozenset[str] = frozenset({
    "blank_line",
})

# Canonical types whose payload is the literal string in "raw".
_RAW_TYPES: frozenset[str] = frozenset({
    "text",
    "codespan",
    "html_inline",
    "html_block",
})

# ---------------------------------------------------------------------------
# mdast-to-canonical type mapping
# ---------------------------------------------------------------------------

_MDAST_TYPE_MAP: dict[str, str] = {
    "heading": "heading",
    "paragraph": "paragraph",
    "blockquote": "block_quote",
    "list": "list",
    "listItem": "list_item",
    "code": "block_code",
    "thematicBreak": "thematic_break",
    "text": "text",
    "strong": "strong",
    "emphasis": "emphasis",
    "delete": "strikethrough",
    "inlineCode": "codespan",
    "link": "link",
    "linkReference": "link_reference",
    "image": "image",
    "imageReference": "image_reference",
    "break": "linebreak",
}


class ASTNormalizer:
    """Parse Markdown and normalize to canonical AST tokens.

    Parameters
    ----------
    plugins:
        mistune plugins to enable.  Defaults to
        :data:`~slackify.config.DEFAULT_PLUGINS`.
    """

    def __init__(self, plugins: list[str] | None = None) -> None:
        self._parser = mistune.create_markdown(
            renderer="ast",
            plugins=list(DEFAULT_PLUGINS if plugins is None else plugins),
        )

    def parse(self, markdown: str) -> list[dict]:
        """Parse markdown and return the normalized token list."""
        raw_tokens = self._parser(markdown)
        if isinstance(raw_tokens, str):
            return []
        return self.normalize(raw_tokens)

    # -- mistune ------------------------------------------------------------

    def normalize(self, tokens: list[dict]) -> list[dict]:
        """Normalize an already-parsed mistune token list."""
        result: list[dict] = []
        for token in tokens:
            normalized = self._normalize_token(token)
            if normalized is not None:
                result.append(normalized)
        return result

    def _normalize_token(self, token: dict) -> dict | None:
        """Normalize a single token, returning None if it should be skipped."""
        raw_type = token.get("type", "")

        if raw_type in _SKIP_TYPES:
            return None

        # mdast keeps soft line breaks as a newline inside the text node
        if raw_type == "softbreak":
            return {"type": "text", "raw": "\n"}

        canonical_type = _MISTUNE_TYPE_MAP.get(raw_type)
        if canonical_type is None:
            return {"type": raw_type}

        result: dict = {"type": canonical_type}

        if canonical_type == "block_code":
            raw_code = token.get("raw", "")
            if raw_code.endswith("\n"):
                raw_code = raw_code[:-1]
            result["raw"] = raw_code
        elif canonical_type in _RAW_TYPES:
            result["raw"] = token.get("raw", "")

        attrs = token.get("attrs")
        if attrs:
            result["attrs"] = dict(attrs)

        children = token.get("children")
        if children:
            result["children"] = self.normalize(children)

        return result

    # -- mdast --------------------------------------------------------------

    def from_mdast(self, root: dict) -> list[dict]:
        """Normalize an mdast ``root`` node to canonical block tokens.

        Raises
        ------
        SlackifyInputError
            If *root* is not an mdast root node.
        """
        if not isinstance(root, dict) or root.get("type") != "root":
            received = root.get("type") if isinstance(root, dict) else type(root).__name__
            raise SlackifyInputError(
                "Expected an mdast node of type 'root'.",
                context={"expected": "root", "received": received},
            )
        return [self._from_mdast_node(n, block=True) for n in root.get("children", [])]

    def _from_mdast_nodes(self, nodes: list[dict], block: bool) -> list[dict]:
        return [self._from_mdast_node(n, block) for n in nodes]

    def _from_mdast_node(self, node: dict, block: bool) -> dict:
        """Map one mdast node (and its subtree) to a canonical token."""
        node_type = node.get("type", "")

        if node_type == "html":
            return {
                "type": "html_block" if block else "html_inline",
                "raw": node.get("value", ""),
            }

        canonical_type = _MDAST_TYPE_MAP.get(node_type)
        if canonical_type is None:
            return {"type": node_type}

        result: dict = {"type": canonical_type}
        attrs: dict[str, Any] = {}

        if canonical_type in ("text", "codespan"):
            result["raw"] = node.get("value", "")
        elif canonical_type == "block_code":
            result["raw"] = node.get("value", "")
            if node.get("lang"):
                attrs["info"] = node["lang"]
        elif canonical_type == "heading":
            attrs["level"] = node.get("depth", 1)
        elif canonical_type == "list":
            attrs["ordered"] = bool(node.get("ordered"))
            if node.get("start") is not None:
                attrs["start"] = node["start"]
        elif canonical_type == "list_item":
            if node.get("checked") is not None:
                attrs["checked"] = bool(node["checked"])
        elif canonical_type in ("link", "image"):
            attrs["url"] = node.get("url", "")
            if node.get("title") is not None:
                attrs["title"] = node["title"]
            if canonical_type == "image" and node.get("alt"):
                result["children"] = [{"type": "text", "raw": node["alt"]}]

        if attrs:
            result["attrs"] = attrs

        children = node.get("children")
        if children:
            # Only paragraphs and headings switch from block to inline content
            child_block = block and canonical_type not in ("paragraph", "heading")
            result["children"] = self._from_mdast_nodes(children, child_block)

        return result
