"""Markdown to Slack Block Kit conversion pipeline.

Public API:

- :class:`MarkdownToSlackConverter` — Markdown / mdast → Block Kit blocks.
- :class:`ASTNormalizer` — parse and normalize Markdown to canonical tokens.
- :func:`build_blocks` — convert canonical tokens to Block Kit block dicts.
- :func:`accumulate_inline` — fold inline tokens into section/image blocks.
- :func:`render_mrkdwn` / :func:`render_plain_text` — inline rendering.
"""

from slackify.converter.accumulator import accumulate_inline
from slackify.converter.ast_normalizer import ASTNormalizer
from slackify.converter.block_builder import build_blocks
from slackify.converter.inline_renderer import render_mrkdwn, render_plain_text
from slackify.converter.md_to_slack import MarkdownToSlackConverter, markdown_to_blocks

__all__ = [
    "ASTNormalizer",
    "MarkdownToSlackConverter",
    "accumulate_inline",
    "build_blocks",
    "markdown_to_blocks",
    "render_mrkdwn",
    "render_plain_text",
]
