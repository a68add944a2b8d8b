"""Configuration for slackify.

:class:`SlackifyConfig` is a dataclass that captures every tuneable knob of
the converter.  Instances are passed to :class:`MarkdownToSlackConverter`
and :func:`build_blocks`.

:data:`SUPPORTED_PLUGINS` lists the mistune plugins the parsing front end
accepts.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

# ---------------------------------------------------------------------------
# Parser plugin constants
# ---------------------------------------------------------------------------

DEFAULT_PLUGINS: list[str] = [
    "strikethrough",
    "task_lists",
    "url",
]
"""mistune plugins enabled by default."""

SUPPORTED_PLUGINS: frozenset[str] = frozenset({
    "strikethrough",
    "task_lists",
    "url",
    "table",
    "footnotes",
})
"""Plugins that may be listed in :attr:`SlackifyConfig.mistune_plugins`.
Tokens produced by ``table`` and ``footnotes`` are skipped with a warning."""


# ---------------------------------------------------------------------------
# Configuration dataclass
# ---------------------------------------------------------------------------

@dataclass
class SlackifyConfig:
    """Complete configuration for a slackify converter.

    Every parameter has a default; ``SlackifyConfig()`` is a valid
    configuration.

    Parameters
    ----------
    mistune_plugins:
        mistune plugins used when parsing raw Markdown.  Must be a subset
        of :data:`SUPPORTED_PLUGINS`.
    warn_on_dropped_content:
        Record a ``CONTENT_DROPPED`` warning whenever content inside a list
        item or block quote is dropped because it is not a paragraph.
    warn_on_unknown_tokens:
        Record an ``UNKNOWN_TOKEN`` warning for every top-level token kind
        that has no Block Kit equivalent.
    metrics:
        Optional :class:`~slackify.observability.MetricsHook` backend.
    debug_dump_ast:
        Write the normalised AST to *stderr* on each conversion.
    debug_dump_payload:
        Write the Block Kit payload to *stderr* on each conversion.
    """

    # ── Parsing ─────────────────────────────────────────────────────────
    mistune_plugins: list[str] = field(
        default_factory=lambda: list(DEFAULT_PLUGINS),
    )

    # ── Warnings ────────────────────────────────────────────────────────
    warn_on_dropped_content: bool = True

    warn_on_unknown_tokens: bool = True

    # ── Observability ──────────────────────────────────────────────────
    metrics: Any | None = None

    # ── Debug ───────────────────────────────────────────────────────────
    debug_dump_ast: bool = False

    debug_dump_payload: bool = False

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        unknown = [p for p in self.mistune_plugins if p not in SUPPORTED_PLUGINS]
        if unknown:
            raise ValueError(
                f"Unsupported mistune plugin(s): {', '.join(unknown)}. "
                f"Supported: {', '.join(sorted(SUPPORTED_PLUGINS))}"
            )
