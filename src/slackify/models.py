"""Public data models for the slackify package.

Plain dataclasses shared between the converter and its callers.
"""

from __future__ import annotations

from dataclasses import dataclass, field


# ---------------------------------------------------------------------------
# Conversion warnings
# ---------------------------------------------------------------------------

@dataclass
class ConversionWarning:
    """A non-fatal issue encountered during conversion.

    Warnings are accumulated in :class:`ConversionResult` so callers can
    inspect what was dropped after the conversion completes.

    Attributes
    ----------
    code:
        A machine-readable warning code (e.g. ``"UNKNOWN_TOKEN"``).
    message:
        A human-readable description of the issue.
    context:
        Arbitrary structured data for diagnostics.
    """

    code: str
    message: str
    context: dict = field(default_factory=dict)


# ---------------------------------------------------------------------------
# Conversion result
# ---------------------------------------------------------------------------

@dataclass
class ConversionResult:
    """Output of a Markdown-to-Block-Kit conversion.

    Attributes
    ----------
    blocks:
        Block Kit block payloads (dicts), in document order, ready to be
        passed as the ``blocks`` argument of a Slack API call.
    warnings:
        Non-fatal issues discovered during conversion.
    """

    blocks: list[dict] = field(default_factory=list)
    warnings: list[ConversionWarning] = field(default_factory=list)
