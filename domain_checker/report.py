"""Aggregate per-domain statuses into a summarised report."""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, replace
from datetime import UTC, datetime

from domain_checker.prober import DomainStatus


@dataclass(frozen=True)
class Summary:
    total_checked: int
    registered_count: int
    unregistered_count: int
    error_count: int


@dataclass(frozen=True)
class CheckReport:
    timestamp: str
    domain_count: int
    domains: tuple[DomainStatus, ...]
    summary: Summary


def _count_errors(statuses: Iterable[DomainStatus]) -> int:
    return sum(1 for s in statuses if s.error)


def build_report(statuses: Sequence[DomainStatus], timestamp: str | None = None) -> CheckReport:
    """Build a report over the full list of statuses, keeping their order.

    Args:
        statuses: Probe results, usually in completion order.
        timestamp: ISO-8601 completion time. Defaults to now (UTC).
    """
    if timestamp is None:
        timestamp = datetime.now(UTC).isoformat()
    registered = sum(1 for s in statuses if s.registered)
    summary = Summary(
        total_checked=len(statuses),
        registered_count=registered,
        unregistered_count=len(statuses) - registered,
        error_count=_count_errors(statuses),
    )
    return CheckReport(
        timestamp=timestamp,
        domain_count=len(statuses),
        domains=tuple(statuses),
        summary=summary,
    )


def filter_unregistered_only(report: CheckReport, active: bool = True) -> CheckReport:
    """Narrow the report to unregistered domains.

    The registered/unregistered totals still describe the whole batch; only
    ``error_count`` is recomputed over the domains that remain.
    """
    if not active:
        return report
    kept = tuple(s for s in report.domains if not s.registered)
    return replace(
        report,
        domain_count=len(kept),
        domains=kept,
        summary=replace(report.summary, error_count=_count_errors(kept)),
    )


def sort_statuses(statuses: Iterable[DomainStatus]) -> list[DomainStatus]:
    """Sort for display: unregistered first, then alphabetically."""
    return sorted(statuses, key=lambda s: (s.registered, s.domain))
