"""Severity-based scoring: overall report score and recommendation impact."""

from collections import Counter
from typing import Any, Iterable, Mapping, Optional

from seo_scoring.config import DEFAULT_OVERALL_CONFIG, OverallScoringConfig
from seo_scoring.constants import MAX_IMPACT, MAX_SCORE, MIN_IMPACT, MIN_SCORE
from seo_scoring.models import Issue, Severity


def _severity_of(issue: Any) -> Optional[str]:
    if isinstance(issue, Issue):
        return issue.severity
    if isinstance(issue, Mapping):
        return issue.get('severity')
    return None


def count_by_severity(issues: Optional[Iterable[Any]]) -> Counter:
    """Count issues per known severity.

    Works on raw issue dicts or normalized Issues. Unknown severities are
    left out, and all four known levels are always present in the result.
    """
    known = {severity.value for severity in Severity}
    counts = Counter({severity.value: 0 for severity in Severity})
    for issue in issues or ():
        severity = _severity_of(issue)
        if isinstance(severity, str) and severity in known:
            counts[severity] += 1
    return counts


def calculate_overall_score(
    scan_results: Optional[Mapping[str, Any]],
    config: OverallScoringConfig = DEFAULT_OVERALL_CONFIG,
) -> float:
    """Composite 0-100 score from issue severities.

    Formula: 100 - (critical*10 + high*5 + medium*2 + low*1), clamped.
    Returns 0 when the scan or its issue list is missing; an empty issue
    list scores 100.
    """
    if not isinstance(scan_results, Mapping):
        return 0

    issues = scan_results.get('issues')
    if not isinstance(issues, (list, tuple)):
        return 0

    counts = count_by_severity(issues)
    deductions = sum(
        counts[severity] * config.deductions.get(severity, 0)
        for severity in counts
    )

    return max(MIN_SCORE, min(MAX_SCORE, MAX_SCORE - deductions))


def calculate_impact_score(issues: Optional[Iterable[Any]]) -> int:
    """Impact (1-5) of acting on a group of issues, from their severity mix."""
    issues = list(issues or ())
    if not issues:
        return MIN_IMPACT

    counts = count_by_severity(issues)
    critical = counts[Severity.CRITICAL.value]
    high = counts[Severity.HIGH.value]
    medium = counts[Severity.MEDIUM.value]

    if critical > 3 or (critical > 0 and high > 2):
        impact = 5
    elif critical > 0 or high > 2:
        impact = 4
    elif high > 0 or medium > 3:
        impact = 3
    elif medium > 0:
        impact = 2
    else:
        impact = 1

    return max(MIN_IMPACT, min(MAX_IMPACT, impact))
