"""Metrics hook protocol and no-op default implementation.

The converter reports a handful of data points per conversion.  By default
a :class:`NoopMetricsHook` discards them; pass any object satisfying
:class:`MetricsHook` as ``SlackifyConfig(metrics=...)`` to route them to
StatsD, Prometheus or similar.

Emitted metric names:

* ``slackify.blocks_created_total``       -- counter, tagged ``block_type``
* ``slackify.conversion_warnings_total``  -- counter, tagged ``code``
* ``slackify.conversion_duration_ms``     -- timing, tagged ``source``
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class MetricsHook(Protocol):
    """Protocol that any metrics backend must satisfy.

    *tags* keys and values are strings; backends translate them into their
    own labelling scheme.
    """

    def increment(
        self,
        name: str,
        value: int = 1,
        tags: dict[str, str] | None = None,
    ) -> None:
        """Increment a counter metric."""
        ...

    def timing(
        self,
        name: str,
        ms: float,
        tags: dict[str, str] | None = None,
    ) -> None:
        """Record a duration in milliseconds."""
        ...

    def gauge(
        self,
        name: str,
        value: float,
        tags: dict[str, str] | None = None,
    ) -> None:
        """Set a gauge metric to an absolute value."""
        ...


class NoopMetricsHook:
    """Metrics backend that silently discards all data points."""

    __slots__ = ()

    def increment(
        self,
        name: str,
        value: int = 1,
        tags: dict[str, str] | None = None,
    ) -> None:
        pass

    def timing(
        self,
        name: str,
        ms: float,
        tags: dict[str, str] | None = None,
    ) -> None:
        pass

    def gauge(
        self,
        name: str,
        value: float,
        tags: dict[str, str] | None = None,
    ) -> None:
        pass


def resolve_metrics(hook: Any | None) -> MetricsHook:
    """Return *hook* if it satisfies :class:`MetricsHook`, else a no-op."""
    if hook is not None and isinstance(hook, MetricsHook):
        return hook
    return NoopMetricsHook()
