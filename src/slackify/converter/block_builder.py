"""Convert normalized AST tokens to Slack Block Kit block dicts.

Block-level token mapping:

- heading -> ``header`` block (plain text only)
- paragraph -> ``section`` block(s), with images split out as ``image`` blocks
- block_code -> ``section`` block with a fenced code span
- block_quote -> one ``section`` per quoted paragraph, prefixed with ``> ``
- list -> a single ``section`` block, one line per item
- thematic_break -> ``divider``
- anything else -> skipped with a warning

Nested content that Block Kit sections cannot express (lists inside list
items, code inside quotes, ...) is dropped and reported as a
``CONTENT_DROPPED`` warning.
"""

from __future__ import annotations

from collections.abc import Callable as _Callable
from collections.abc import Sequence

from slackify.config import SlackifyConfig
from slackify.converter.accumulator import accumulate_inline, section_block
from slackify.converter.inline_renderer import render_mrkdwn_texts, render_plain_texts
from slackify.errors import SlackifyInputError
from slackify.models import ConversionWarning
from slackify.observability.logger import get_logger

log = get_logger("slackify.converter")

QUOTE_PREFIX = "> "
BULLET = "• "
CHECKED_BOX = ":ballot_box_with_check: "
UNCHECKED_BOX = ":negative_squared_cross_mark: "


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def build_blocks(
    tokens: Sequence[dict],
    config: SlackifyConfig | None = None,
) -> tuple[list[dict], list[ConversionWarning]]:
    """Convert the top-level tokens of a document to Block Kit blocks.

    Parameters
    ----------
    tokens:
        Canonical block-level tokens from :class:`ASTNormalizer`, in
        document order.
    config:
        Converter configuration.  Defaults to ``SlackifyConfig()``.

    Returns
    -------
    tuple[list[dict], list[ConversionWarning]]
        (blocks, warnings).  Blocks keep document order.

    Raises
    ------
    SlackifyInputError
        If *tokens* is not a sequence of token dicts.
    """
    if isinstance(tokens, (str, bytes, dict)) or not isinstance(tokens, Sequence):
        raise SlackifyInputError(
            "Expected a sequence of block-level tokens.",
            context={"expected": "list[dict]", "received": type(tokens).__name__},
        )

    ctx = _BuildContext(config or SlackifyConfig())
    blocks: list[dict] = []
    for token in tokens:
        blocks.extend(_process_token(token, ctx))
    return blocks, ctx.warnings


class _BuildContext:
    """Configuration and warnings shared by the handlers of one build."""

    __slots__ = ("config", "warnings")

    def __init__(self, config: SlackifyConfig) -> None:
        self.config = config
        self.warnings: list[ConversionWarning] = []

    def add_warning(self, code: str, message: str, **context: object) -> None:
        if code == "UNKNOWN_TOKEN" and not self.config.warn_on_unknown_tokens:
            return
        if code == "CONTENT_DROPPED" and not self.config.warn_on_dropped_content:
            return
        log.debug(message, extra={"extra_fields": {"code": code, **context}})
        self.warnings.append(ConversionWarning(
            code=code, message=message, context=dict(context),
        ))


# ---------------------------------------------------------------------------
# Token dispatch
# ---------------------------------------------------------------------------

def _process_token(token: dict, ctx: _BuildContext) -> list[dict]:
    """Process a single token and return the block(s) produced."""
    if not isinstance(token, dict):
        ctx.add_warning(
            "UNKNOWN_TOKEN",
            f"Non-token value of type '{type(token).__name__}' was skipped.",
        )
        return []

    token_type = token.get("type", "")
    handler = _BLOCK_HANDLERS.get(token_type)
    if handler is not None:
        return handler(token, ctx)
    ctx.add_warning(
        "UNKNOWN_TOKEN",
        f"Unknown token type '{token_type}' was skipped.",
        token_type=token_type,
    )
    return []


# ---------------------------------------------------------------------------
# Block builders
# ---------------------------------------------------------------------------

def _build_heading(token: dict, ctx: _BuildContext) -> list[dict]:
    """Build a ``header`` block from the heading's literal text."""
    text = render_plain_texts(token.get("children", []))
    return [{
        "type": "header",
        "text": {
            "type": "plain_text",
            "text": text,
        },
    }]


def _build_paragraph(token: dict, ctx: _BuildContext) -> list[dict]:
    return accumulate_inline(token.get("children", []))


def _build_code_block(token: dict, ctx: _BuildContext) -> list[dict]:
    """Build a ``section`` holding the code fenced with triple backticks."""
    raw = token.get("raw", "")
    info = token.get("attrs", {}).get("info") or ""
    return [section_block(f"```{info}\n{raw}\n```")]


def _build_block_quote(token: dict, ctx: _BuildContext) -> list[dict]:
    """Build one or more quoted ``section`` blocks.

    Only paragraph children are kept.  Each paragraph is accumulated on
    its own, so every one of them opens a new ``> `` section.
    """
    blocks: list[dict] = []
    for child in token.get("children", []):
        child_type = child.get("type", "")
        if child_type != "paragraph":
            ctx.add_warning(
                "CONTENT_DROPPED",
                f"'{child_type}' inside a block quote was dropped.",
                container="block_quote",
                token_type=child_type,
            )
            continue
        blocks.extend(accumulate_inline(child.get("children", []), QUOTE_PREFIX))
    return blocks


def _build_list(token: dict, ctx: _BuildContext) -> list[dict]:
    """Build a single ``section`` block with one line per list item.

    Ordered lists are renumbered from 1 whatever their declared start.
    The counter advances for every item, including items whose content
    is dropped.
    """
    attrs = token.get("attrs", {})
    ordered = bool(attrs.get("ordered")) or attrs.get("start") is not None

    lines: list[str] = []
    for index, item in enumerate(token.get("children", []), start=1):
        text = _render_list_item(item, ctx)
        if text is None:
            lines.append("")
            continue
        lines.append(f"{_item_marker(item, ordered, index)}{text}")

    return [section_block("\n".join(lines))]


def _item_marker(item: dict, ordered: bool, index: int) -> str:
    if ordered:
        return f"{index}. "
    checked = item.get("attrs", {}).get("checked")
    if checked is not None:
        return CHECKED_BOX if checked else UNCHECKED_BOX
    return BULLET


def _render_list_item(item: dict, ctx: _BuildContext) -> str | None:
    """Render the first paragraph of a list item as one mrkdwn line.

    Returns ``None`` when the item does not start with a paragraph.
    Images are left out of the line.
    """
    children = item.get("children", [])
    first = children[0] if children else None
    if first is None or first.get("type") != "paragraph":
        ctx.add_warning(
            "CONTENT_DROPPED",
            "List item without a leading paragraph rendered as an empty line.",
            container="list_item",
            token_type=first.get("type", "") if first else None,
        )
        return None

    for extra in children[1:]:
        ctx.add_warning(
            "CONTENT_DROPPED",
            f"'{extra.get('type', '')}' inside a list item was dropped.",
            container="list_item",
            token_type=extra.get("type", ""),
        )

    inline = [c for c in first.get("children", []) if c.get("type") != "image"]
    return render_mrkdwn_texts(inline)


def _build_divider(token: dict, ctx: _BuildContext) -> list[dict]:
    return [{"type": "divider"}]


# ---------------------------------------------------------------------------
# Block handler dispatch table
# ---------------------------------------------------------------------------

_BlockHandler = _Callable[[dict, _BuildContext], list[dict]]

_BLOCK_HANDLERS: dict[str, _BlockHandler] = {
    "heading": _build_heading,
    "paragraph": _build_paragraph,
    "block_code": _build_code_block,
    "block_quote": _build_block_quote,
    "list": _build_list,
    "thematic_break": _build_divider,
}
