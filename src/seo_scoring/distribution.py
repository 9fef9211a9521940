"""Score distribution and percentile analysis for competitor benchmarking."""

import math
from typing import Optional, Sequence

from seo_scoring.constants import DISTRIBUTION_RANGES
from seo_scoring.logging_config import get_logger
from seo_scoring.models import BenchmarkComparison, DistributionRange, Percentiles

logger = get_logger(__name__)

SCORE_RANGES = tuple(
    DistributionRange(min=low, max=high, label=label)
    for low, high, label in DISTRIBUTION_RANGES
)


def find_bucket(score: float, ranges: Sequence[DistributionRange] = SCORE_RANGES) -> Optional[int]:
    """Index of the first [min, max) range holding ``score``, or None.

    Scores of 100 or more fall outside every range.
    """
    for index, score_range in enumerate(ranges):
        if score_range.contains(score):
            return index
    return None


def calculate_percentile(sorted_scores: Sequence[float], percentile: float) -> float:
    """Ceiling-rank percentile of an ascending score list.

    index = ceil(p/100 * n) - 1, clamped to [0, n-1]. Empty input gives 0.
    """
    if not sorted_scores:
        return 0

    index = math.ceil((percentile / 100) * len(sorted_scores)) - 1
    return sorted_scores[max(0, min(len(sorted_scores) - 1, index))]


def calculate_distribution(
    client_score: float,
    competitor_scores: Optional[Sequence[float]],
    ranges: Sequence[DistributionRange] = SCORE_RANGES,
) -> BenchmarkComparison:
    """Bucket the client and competitor scores and compute percentiles.

    Args:
        client_score: The client's score
        competitor_scores: Competitor scores (None is treated as empty)
        ranges: Half-open score ranges, scanned in order

    Returns:
        BenchmarkComparison with per-range competitor counts, the client's
        range index and p25/p50/p75 of the competitors
    """
    competitor_scores = list(competitor_scores or [])
    counts = [0] * len(ranges)

    client_position = find_bucket(client_score, ranges)
    if client_position is None:
        logger.debug(f"Client score {client_score} is outside all distribution ranges")

    for score in competitor_scores:
        index = find_bucket(score, ranges)
        if index is None:
            logger.debug(f"Competitor score {score} is outside all distribution ranges, dropped")
            continue
        counts[index] += 1

    scores = sorted(competitor_scores)

    return BenchmarkComparison(
        ranges=tuple(ranges),
        counts=tuple(counts),
        client_position=client_position,
        percentiles=Percentiles(
            p25=calculate_percentile(scores, 25),
            p50=calculate_percentile(scores, 50),
            p75=calculate_percentile(scores, 75),
            client=client_score,
        ),
    )
