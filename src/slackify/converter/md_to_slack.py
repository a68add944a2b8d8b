"""Full Markdown-to-Block-Kit conversion pipeline.

:class:`MarkdownToSlackConverter` runs two stages:

1. **Normalize** -- :class:`ASTNormalizer` parses Markdown with mistune (or
   maps an mdast tree) onto canonical tokens.
2. **Build** -- :func:`build_blocks` turns the tokens into Block Kit
   block dicts, collecting :class:`ConversionWarning` along the way.

The result is a :class:`ConversionResult` holding the blocks and any
non-fatal warnings.
"""

from __future__ import annotations

import json
import sys
import time
from collections import Counter

from slackify.config import SlackifyConfig
from slackify.converter.ast_normalizer import ASTNormalizer
from slackify.converter.block_builder import build_blocks
from slackify.models import ConversionResult, ConversionWarning
from slackify.observability.logger import get_logger
from slackify.observability.metrics import resolve_metrics

log = get_logger("slackify.converter")


class MarkdownToSlackConverter:
    """Convert Markdown to Slack Block Kit payloads.

    Parameters
    ----------
    config:
        Converter configuration.  Defaults to ``SlackifyConfig()``.

    Examples
    --------
    >>> converter = MarkdownToSlackConverter()
    >>> result = converter.convert("# Hello\\n\\nWorld")
    >>> [b["type"] for b in result.blocks]
    ['header', 'section']
    """

    def __init__(self, config: SlackifyConfig | None = None) -> None:
        self._config = config or SlackifyConfig()
        self._normalizer = ASTNormalizer(self._config.mistune_plugins)
        self._metrics = resolve_metrics(self._config.metrics)

    def convert(self, markdown: str) -> ConversionResult:
        """Parse *markdown* and convert it to blocks."""
        start = time.perf_counter()
        tokens = self._normalizer.parse(markdown)
        return self._build(tokens, "markdown", start)

    def convert_tokens(self, tokens: list[dict]) -> ConversionResult:
        """Convert already-normalized canonical tokens to blocks."""
        return self._build(tokens, "tokens", time.perf_counter())

    def convert_mdast(self, root: dict) -> ConversionResult:
        """Convert an mdast ``root`` node to blocks."""
        start = time.perf_counter()
        tokens = self._normalizer.from_mdast(root)
        return self._build(tokens, "mdast", start)

    def _build(self, tokens: list[dict], source: str, start: float) -> ConversionResult:
        if self._config.debug_dump_ast:
            print(
                "[slackify] Normalized AST:",
                json.dumps(tokens, indent=2, ensure_ascii=False),
                file=sys.stderr,
            )

        blocks, warnings = build_blocks(tokens, self._config)

        if self._config.debug_dump_payload:
            print(
                "[slackify] Block Kit payload:",
                json.dumps(blocks, indent=2, ensure_ascii=False),
                file=sys.stderr,
            )

        elapsed_ms = (time.perf_counter() - start) * 1000
        self._report(blocks, warnings, source, elapsed_ms)
        return ConversionResult(blocks=blocks, warnings=warnings)

    def _report(
        self,
        blocks: list[dict],
        warnings: list[ConversionWarning],
        source: str,
        elapsed_ms: float,
    ) -> None:
        for block_type, count in Counter(b["type"] for b in blocks).items():
            self._metrics.increment(
                "slackify.blocks_created_total", count, tags={"block_type": block_type},
            )
        for code, count in Counter(w.code for w in warnings).items():
            self._metrics.increment(
                "slackify.conversion_warnings_total", count, tags={"code": code},
            )
        self._metrics.timing(
            "slackify.conversion_duration_ms", elapsed_ms, tags={"source": source},
        )
        log.debug(
            "conversion complete",
            extra={"extra_fields": {
                "source": source,
                "blocks": len(blocks),
                "warnings": len(warnings),
                "duration_ms": round(elapsed_ms, 3),
            }},
        )


def markdown_to_blocks(markdown: str, config: SlackifyConfig | None = None) -> list[dict]:
    """Convert *markdown* to a list of Block Kit blocks in one call."""
    return MarkdownToSlackConverter(config).convert(markdown).blocks
