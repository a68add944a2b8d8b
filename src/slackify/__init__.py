"""slackify — Markdown to Slack Block Kit converter.

Public re-exports
-----------------

* **Conversion:** :class:`MarkdownToSlackConverter`, :func:`markdown_to_blocks`,
  :func:`build_blocks`, :class:`ASTNormalizer`
* **Configuration:** :class:`SlackifyConfig`
* **Errors:** :class:`SlackifyError` and its subclasses, :class:`ErrorCode`
* **Models:** :class:`ConversionResult`, :class:`ConversionWarning`

Usage::

    from slackify import markdown_to_blocks

    blocks = markdown_to_blocks("# Release notes\\n\\n- *fast*\\n- ~slow~")
    client.chat_postMessage(channel="#general", blocks=blocks)
"""

from __future__ import annotations

# ── Conversion ─────────────────────────────────────────────────────────
from slackify.converter import (
    ASTNormalizer,
    MarkdownToSlackConverter,
    build_blocks,
    markdown_to_blocks,
)

# ── Configuration ───────────────────────────────────────────────────────
from slackify.config import DEFAULT_PLUGINS, SUPPORTED_PLUGINS, SlackifyConfig

# ── Errors ──────────────────────────────────────────────────────────────
from slackify.errors import (
    ErrorCode,
    SlackifyConversionError,
    SlackifyError,
    SlackifyInputError,
)

# ── Models ──────────────────────────────────────────────────────────────
from slackify.models import ConversionResult, ConversionWarning

# ── Public surface ──────────────────────────────────────────────────────

__all__ = [
    # Conversion
    "MarkdownToSlackConverter",
    "markdown_to_blocks",
    "build_blocks",
    "ASTNormalizer",
    # Configuration
    "SlackifyConfig",
    "DEFAULT_PLUGINS",
    "SUPPORTED_PLUGINS",
    # Errors
    "SlackifyError",
    "ErrorCode",
    "SlackifyConversionError",
    "SlackifyInputError",
    # Models
    "ConversionResult",
    "ConversionWarning",
]
