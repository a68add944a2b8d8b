"""Inline rendering: canonical inline tokens to Slack text.

Two rendering modes are provided:

* **plain text** -- used for ``header`` blocks, whose ``plain_text`` object
  cannot carry markup.  Only the literal text of a token and its
  descendants survives.
* **mrkdwn** -- used for ``section`` blocks.  Emphasis, strong,
  strikethrough, code spans and links are rewritten into Slack's mrkdwn
  dialect::

      emphasis       _text_
      strong         *text*
      strikethrough  ~text~
      codespan       `text`
      link           <url|text>

Images render as nothing in mrkdwn mode; the block accumulator turns
them into standalone ``image`` blocks instead.
"""

from __future__ import annotations

from collections.abc import Iterable

# Tokens whose plain text is the plain text of their children.
_WRAPPER_TYPES: frozenset[str] = frozenset({
    "emphasis",
    "strong",
    "strikethrough",
    "link",
    "link_reference",
})

# Tokens that carry their literal value in ``raw``.
_LITERAL_TYPES: frozenset[str] = frozenset({
    "text",
    "codespan",
    "html_inline",
})

_MRKDWN_MARKERS: dict[str, str] = {
    "emphasis": "_",
    "strong": "*",
    "strikethrough": "~",
}


# ---------------------------------------------------------------------------
# Plain text
# ---------------------------------------------------------------------------

def render_plain_text(token: dict) -> str:
    """Return the literal text content of *token* and its descendants.

    Wrapper tokens contribute only their children's text, line breaks and
    image references contribute nothing, and an image contributes its
    title (or its URL when it has none).
    """
    token_type = token.get("type", "")

    if token_type in _WRAPPER_TYPES:
        return render_plain_texts(token.get("children", []))

    if token_type in _LITERAL_TYPES:
        return token.get("raw", "")

    if token_type == "image":
        attrs = token.get("attrs", {})
        return attrs.get("title") or attrs.get("url", "")

    # linebreak, image_reference and unknown kinds
    return ""


def render_plain_texts(tokens: Iterable[dict]) -> str:
    """Concatenate :func:`render_plain_text` over *tokens* in order."""
    return "".join(render_plain_text(t) for t in tokens)


# ---------------------------------------------------------------------------
# mrkdwn
# ---------------------------------------------------------------------------

def render_mrkdwn(token: dict) -> str:
    """Render an inline token (and its descendants) as Slack mrkdwn.

    Unrecognised token kinds, images included, render as the empty string.

    Parameters
    ----------
    token:
        A canonical inline token.

    Returns
    -------
    str
        The mrkdwn representation.
    """
    token_type = token.get("type", "")

    if token_type == "text" or token_type == "html_inline":
        return token.get("raw", "")

    if token_type == "codespan":
        return f"`{token.get('raw', '')}`"

    if token_type in _MRKDWN_MARKERS:
        marker = _MRKDWN_MARKERS[token_type]
        inner = render_mrkdwn_texts(token.get("children", []))
        return f"{marker}{inner}{marker}"

    if token_type == "link":
        url = token.get("attrs", {}).get("url", "")
        inner = render_mrkdwn_texts(token.get("children", []))
        # Slack's renderer expects the space after the closing bracket.
        return f"<{url}|{inner}> "

    return ""


def render_mrkdwn_texts(tokens: Iterable[dict]) -> str:
    """Concatenate :func:`render_mrkdwn` over *tokens* in order."""
    return "".join(render_mrkdwn(t) for t in tokens)
