"""Fold inline tokens into as few ``section`` blocks as possible.

Consecutive non-image tokens of one paragraph are merged into a single
``section`` block.  An image always becomes its own ``image`` block, and
text after it starts a fresh section.
"""

from __future__ import annotations

from collections.abc import Iterable
from functools import partial, reduce

from slackify.converter.inline_renderer import render_mrkdwn


def section_block(text: str) -> dict:
    """Build a ``section`` block carrying mrkdwn *text*."""
    return {
        "type": "section",
        "text": {
            "type": "mrkdwn",
            "text": text,
        },
    }


def image_block(token: dict) -> dict:
    """Build an ``image`` block from an inline ``image`` token.

    The ``title`` key is only present when the token has a title, and
    ``alt_text`` falls back to the URL.
    """
    attrs = token.get("attrs", {})
    url = attrs.get("url", "")
    title = attrs.get("title")

    block: dict = {"type": "image", "image_url": url}
    if title:
        block["title"] = {"type": "plain_text", "text": title}
    block["alt_text"] = title if title is not None else url
    return block


def _is_section(block: dict) -> bool:
    return block.get("type") == "section" and bool(block.get("text"))


def _step(acc: tuple[dict, ...], token: dict, prefix: str) -> tuple[dict, ...]:
    """Fold one inline token into the blocks accumulated so far."""
    if token.get("type") == "image":
        return (*acc, image_block(token))

    content = render_mrkdwn(token)
    if acc and _is_section(acc[-1]):
        merged = section_block(acc[-1]["text"]["text"] + content)
        return (*acc[:-1], merged)
    return (*acc, section_block(f"{prefix}{content}"))


def accumulate_inline(tokens: Iterable[dict], prefix: str = "") -> list[dict]:
    """Convert the inline children of one paragraph into blocks.

    Parameters
    ----------
    tokens:
        Inline tokens in document order.
    prefix:
        Text placed at the start of every section this call opens (block
        quotes pass ``"> "``).  It is never inserted on a merge.

    Returns
    -------
    list[dict]
        ``section`` and ``image`` blocks in document order.
    """
    return list(reduce(partial(_step, prefix=prefix), tokens, ()))
