"""Competitive benchmarking of a client site against competitor scans.

For each scoring category the client and every competitor are scored with
the same metric scorer, competitors are ranked, and the scores are bucketed
into a distribution.
"""

from typing import Any, Callable, Dict, Iterable, Mapping, Optional
from urllib.parse import urlparse

from seo_scoring.config import ScoringProfile, default_profile
from seo_scoring.distribution import calculate_distribution
from seo_scoring.exceptions import MissingInputError
from seo_scoring.logging_config import get_logger
from seo_scoring.models import (
    Category,
    CategoryBenchmark,
    CompetitiveBenchmark,
    CompetitorScore,
)
from seo_scoring.scorers import (
    calculate_content_score,
    calculate_keyword_score,
    calculate_performance_score,
    calculate_technical_score,
)

logger = get_logger(__name__)

BENCHMARK_CATEGORIES = (
    Category.TECHNICAL,
    Category.CONTENT,
    Category.KEYWORDS,
    Category.PERFORMANCE,
)

# Scan section read by each category, and its alternate name under 'summary'
CATEGORY_SECTIONS = {
    Category.TECHNICAL: ('seoHealth', 'seoHealth'),
    Category.CONTENT: ('contentStats', 'contentStats'),
    Category.KEYWORDS: ('keywordAnalysis', 'keywordAnalysis'),
    Category.PERFORMANCE: ('performance', 'averagePerformance'),
}


def get_domain_from_url(url: str) -> str:
    """Hostname of a URL without a leading 'www.'.

    Input that does not parse to a hostname is returned unchanged.
    """
    try:
        hostname = urlparse(url).hostname
    except (TypeError, ValueError, AttributeError):
        return url
    if not hostname:
        return url
    return hostname[4:] if hostname.startswith('www.') else hostname


def get_section(scan: Optional[Mapping[str, Any]], category: Category) -> Optional[Mapping[str, Any]]:
    """Raw measurements for a category, from the top level or under 'summary'."""
    if not isinstance(scan, Mapping):
        return None
    key, summary_key = CATEGORY_SECTIONS[category]
    if scan.get(key) is not None:
        return scan[key]
    summary = scan.get('summary')
    if isinstance(summary, Mapping):
        return summary.get(summary_key)
    return None


class BenchmarkAnalyzer:
    """Compares a client scan with competitor scans category by category."""

    def __init__(self, profile: Optional[ScoringProfile] = None):
        """Initialize the analyzer.

        Args:
            profile: Scoring profile; defaults to the built-in weights
        """
        self.profile = profile or default_profile
        self._scorers: Dict[Category, Callable[[Any], float]] = {
            Category.TECHNICAL: lambda section: calculate_technical_score(section, self.profile.technical),
            Category.CONTENT: lambda section: calculate_content_score(section, self.profile.content),
            Category.KEYWORDS: calculate_keyword_score,
            Category.PERFORMANCE: lambda section: calculate_performance_score(section, self.profile.performance),
        }

    def score(self, scan: Optional[Mapping[str, Any]], category: Category) -> float:
        """Score one scan in one category."""
        return self._scorers[category](get_section(scan, category))

    def calculate_category_scores(self, scan: Optional[Mapping[str, Any]]) -> Dict[str, float]:
        """All four dimension scores for a single scan."""
        return {category.value: self.score(scan, category) for category in BENCHMARK_CATEGORIES}

    def analyze(
        self,
        client_data: Optional[Mapping[str, Any]],
        competitors_data: Optional[Mapping[str, Mapping[str, Any]]],
        categories: Optional[Iterable[str]] = None,
    ) -> CompetitiveBenchmark:
        """Benchmark the client against its competitors.

        Args:
            client_data: Client scan data
            competitors_data: Competitor URL -> scan data; entries with an
                'error' key are skipped
            categories: Category names to benchmark (default: all four)

        Returns:
            CompetitiveBenchmark keyed by category name

        Raises:
            MissingInputError: If client_data is not supplied
        """
        if not isinstance(client_data, Mapping):
            raise MissingInputError('client_data', action='run a benchmark')

        competitors = {
            url: data
            for url, data in (competitors_data.items() if isinstance(competitors_data, Mapping) else ())
            if isinstance(data, Mapping) and not data.get('error')
        }

        selected = []
        for name in categories or [category.value for category in BENCHMARK_CATEGORIES]:
            category = Category.parse(name)
            if category not in BENCHMARK_CATEGORIES:
                logger.warning(f"Unknown benchmark category: {name}")
                continue
            selected.append(category)

        client_url = client_data.get('siteUrl') or client_data.get('url') or ''
        logger.info(
            f"Benchmarking {client_url or 'client'} against {len(competitors)} competitors "
            f"in {len(selected)} categories"
        )

        results = {
            category.value: self._benchmark_category(category, client_data, competitors)
            for category in selected
        }
        return CompetitiveBenchmark(client_url=client_url, categories=results)

    def _benchmark_category(
        self,
        category: Category,
        client_data: Mapping[str, Any],
        competitors: Mapping[str, Mapping[str, Any]],
    ) -> CategoryBenchmark:
        client_score = self.score(client_data, category)

        ranked = sorted(
            (
                CompetitorScore(url=url, name=get_domain_from_url(url), score=self.score(data, category))
                for url, data in competitors.items()
            ),
            key=lambda competitor: competitor.score,
            reverse=True,
        )
        scores = [competitor.score for competitor in ranked]

        # Competitors are sorted best first, so the ones ahead form a prefix
        ahead = 0
        for score in scores:
            if client_score >= score:
                break
            ahead += 1

        return CategoryBenchmark(
            category=category.value,
            client_score=client_score,
            competitor_average=sum(scores) / len(scores) if scores else 0,
            client_rank=ahead + 1,
            competitors=tuple(ranked),
            distribution=calculate_distribution(client_score, scores),
        )


def calculate_category_scores(
    scan: Optional[Mapping[str, Any]],
    profile: Optional[ScoringProfile] = None,
) -> Dict[str, float]:
    """Technical, content, keyword and performance scores for one scan."""
    return BenchmarkAnalyzer(profile).calculate_category_scores(scan)
