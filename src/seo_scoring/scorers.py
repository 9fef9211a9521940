"""Metric scorers that turn raw audit measurements into 0-100 scores.

Each scorer reads one section of a scan result:

- technical: ``seoHealth`` percentages (schema, canonical, viewport coverage)
- content: ``contentStats`` average lengths against optimal ranges
- keyword: ``keywordAnalysis`` importance scores
- performance: ``performance`` timings (ms) against good/medium/poor thresholds

Only metrics present in the input contribute, and the weighted average is
divided by the weights of those metrics alone. Absent or malformed input
scores 0 instead of raising.
"""

from functools import reduce
from typing import Any, Callable, Iterable, Mapping, Optional, Tuple

from seo_scoring.config import (
    DEFAULT_CONTENT_CONFIG,
    DEFAULT_PERFORMANCE_CONFIG,
    DEFAULT_TECHNICAL_CONFIG,
    ContentScoringConfig,
    OptimalRange,
    PerformanceScoringConfig,
    PerformanceThresholds,
    TechnicalScoringConfig,
)
from seo_scoring.constants import (
    FAILING_GRADE,
    GRADE_THRESHOLDS,
    LOWEST_RATING,
    MAX_SCORE,
    MIN_SCORE,
    MISSING_METRIC_PREFIX,
    PERFORMANCE_BAND_WIDTH,
    PERFORMANCE_FAIL_BAND_START,
    PERFORMANCE_GOOD_SCORE,
    PERFORMANCE_MEDIUM_BAND_START,
    PERFORMANCE_POOR_BAND_START,
    RATING_THRESHOLDS,
)
from seo_scoring.logging_config import get_logger

logger = get_logger(__name__)


def clamp_score(value: float) -> float:
    """Clamp a score into [0, 100]."""
    return max(MIN_SCORE, min(MAX_SCORE, value))


def is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def weighted_average(
    section: Optional[Mapping[str, Any]],
    weights: Mapping[str, float],
    metric_score: Callable[[str, float], Optional[float]],
) -> float:
    """Weighted average over the metrics present in ``section``.

    Args:
        section: Raw measurements keyed by metric name
        weights: Metric name -> weight
        metric_score: Maps (metric name, raw value) to a 0-100 sub-score,
            or None when the metric cannot be scored

    Returns:
        Weighted average renormalized by the weights actually used, or 0
        when no weighted metric is present
    """
    if not isinstance(section, Mapping):
        return 0

    def accumulate(totals: Tuple[float, float], item: Tuple[str, float]) -> Tuple[float, float]:
        name, weight = item
        value = section.get(name)
        if not is_number(value):
            return totals
        score = metric_score(name, value)
        if score is None:
            return totals
        total, weight_sum = totals
        return total + score * weight, weight_sum + weight

    total, weight_sum = reduce(accumulate, weights.items(), (0.0, 0.0))

    return clamp_score(total / weight_sum) if weight_sum > 0 else 0


def calculate_technical_score(
    seo_health: Optional[Mapping[str, Any]],
    config: TechnicalScoringConfig = DEFAULT_TECHNICAL_CONFIG,
) -> float:
    """Calculate a technical SEO score (0-100) from seoHealth percentages.

    "missing*" percentages are inverted into "present" percentages before
    weighting, so ``{'missingTitlesPercent': 30}`` scores 70.
    """
    def technical_metric(name: str, value: float) -> float:
        if name.startswith(MISSING_METRIC_PREFIX):
            return 100 - value
        return value

    return weighted_average(seo_health, config.weights, technical_metric)


def score_optimal_range(value: float, optimal: OptimalRange) -> float:
    """Score a value against an optimal range.

    100 inside [min, max], prorated by value/min below it and by max/value
    above it.
    """
    if optimal.min <= value <= optimal.max:
        return 100
    if value < optimal.min:
        return (value / optimal.min) * 100
    return (optimal.max / value) * 100


def calculate_content_score(
    content_stats: Optional[Mapping[str, Any]],
    config: ContentScoringConfig = DEFAULT_CONTENT_CONFIG,
) -> float:
    """Calculate a content score (0-100) from average title, description and body lengths."""
    def content_metric(name: str, value: float) -> Optional[float]:
        optimal = config.optimal_ranges.get(name)
        if optimal is None:
            return None
        return score_optimal_range(value, optimal)

    return weighted_average(content_stats, config.weights, content_metric)


def calculate_keyword_score(keyword_analysis: Optional[Mapping[str, Any]]) -> float:
    """Average importanceScore across analyzed keywords.

    Keywords without a numeric importanceScore count as 0.
    """
    if not isinstance(keyword_analysis, Mapping) or not keyword_analysis:
        return 0

    def importance(keyword: Any) -> float:
        if isinstance(keyword, Mapping) and is_number(keyword.get('importanceScore')):
            return keyword['importanceScore']
        return 0

    total = sum(importance(keyword) for keyword in keyword_analysis.values())
    return clamp_score(total / len(keyword_analysis))


def score_timing(value: float, thresholds: PerformanceThresholds) -> float:
    """Score a timing (ms, lower is better) with the piecewise banding curve.

    <= good: 100
    good..medium: 75 down to 50
    medium..poor: 50 down to 25
    > poor: 25 down to 0, reaching 0 at twice the poor threshold
    """
    good, medium, poor = thresholds.good, thresholds.medium, thresholds.poor

    if value <= good:
        return PERFORMANCE_GOOD_SCORE
    if value <= medium:
        return PERFORMANCE_MEDIUM_BAND_START - ((value - good) / (medium - good)) * PERFORMANCE_BAND_WIDTH
    if value <= poor:
        return PERFORMANCE_POOR_BAND_START - ((value - medium) / (poor - medium)) * PERFORMANCE_BAND_WIDTH
    return max(0, PERFORMANCE_FAIL_BAND_START - ((value - poor) / poor) * PERFORMANCE_BAND_WIDTH)


def calculate_performance_score(
    performance: Optional[Mapping[str, Any]],
    config: PerformanceScoringConfig = DEFAULT_PERFORMANCE_CONFIG,
) -> float:
    """Calculate a performance score (0-100) from page timing metrics."""
    def performance_metric(name: str, value: float) -> Optional[float]:
        thresholds = config.thresholds.get(name)
        if thresholds is None:
            logger.debug(f"No thresholds configured for {name}, skipping")
            return None
        return score_timing(value, thresholds)

    return weighted_average(performance, config.weights, performance_metric)


def _first_matching(score: float, thresholds: Iterable[Tuple[float, str]], fallback: str) -> str:
    for minimum, label in thresholds:
        if score >= minimum:
            return label
    return fallback


def calculate_grade(score: float) -> str:
    """Letter grade (A+ .. F) for a 0-100 score."""
    return _first_matching(score, GRADE_THRESHOLDS, FAILING_GRADE)


def get_score_rating(score: float) -> str:
    """Descriptive rating (Excellent .. Critical) for a 0-100 score."""
    return _first_matching(score, RATING_THRESHOLDS, LOWEST_RATING)
