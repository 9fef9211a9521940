"""Normalize raw issue and metric records into fixed-shape models."""

from dataclasses import asdict
from typing import Any, Iterable, List, Mapping

from seo_scoring.constants import (
    DEFAULT_ISSUE_DESCRIPTION,
    DEFAULT_ISSUE_IMPACT,
    DEFAULT_ISSUE_LOCATION,
    DEFAULT_ISSUE_SEVERITY,
    DEFAULT_ISSUE_TITLE,
    DEFAULT_METRIC_DESCRIPTION,
    DEFAULT_METRIC_NAME,
    DEFAULT_METRIC_UNIT,
    DEFAULT_METRIC_VALUE,
)
from seo_scoring.models import Issue, Metric


def _as_mapping(record: Any) -> Mapping[str, Any]:
    if isinstance(record, (Issue, Metric)):
        return asdict(record)
    if isinstance(record, Mapping):
        return record
    return {}


def _is_sequence(records: Any) -> bool:
    return isinstance(records, (list, tuple))


def normalize_issue(raw: Any) -> Issue:
    """Build an Issue from a raw record, defaulting missing fields.

    Severity is kept verbatim; unknown values are not rejected here.
    """
    record = _as_mapping(raw)
    return Issue(
        title=record.get('title') or DEFAULT_ISSUE_TITLE,
        description=record.get('description') or DEFAULT_ISSUE_DESCRIPTION,
        severity=record.get('severity') or DEFAULT_ISSUE_SEVERITY,
        location=record.get('location') or record.get('url') or DEFAULT_ISSUE_LOCATION,
        impact=record.get('impact') or DEFAULT_ISSUE_IMPACT,
        category=record.get('category') or None,
        type=record.get('type') or None,
    )


def normalize_issues(issues: Iterable[Any]) -> List[Issue]:
    """Normalize a list of raw issues. Non-list input yields []."""
    if not _is_sequence(issues):
        return []
    return [normalize_issue(issue) for issue in issues]


def normalize_metric(raw: Any) -> Metric:
    """Build a Metric from a raw record.

    ``value`` falls back to 0 only when missing or None; an explicit 0 is kept.
    """
    record = _as_mapping(raw)
    value = record.get('value')
    return Metric(
        name=record.get('name') or DEFAULT_METRIC_NAME,
        value=DEFAULT_METRIC_VALUE if value is None else value,
        unit=record.get('unit') or DEFAULT_METRIC_UNIT,
        change=record.get('change'),
        description=record.get('description') or DEFAULT_METRIC_DESCRIPTION,
    )


def normalize_metrics(metrics: Iterable[Any]) -> List[Metric]:
    """Normalize a list of raw metrics. Non-list input yields []."""
    if not _is_sequence(metrics):
        return []
    return [normalize_metric(metric) for metric in metrics]
