"""Data models for SEO scoring and reporting."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional, Union

from seo_scoring.constants import MAX_IMPACT, MIN_IMPACT


class Severity(str, Enum):
    """Urgency of an audit issue, critical > high > medium > low."""

    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class Category(str, Enum):
    """Audit categories known to the recommendation engine."""

    TECHNICAL = "technical"
    PERFORMANCE = "performance"
    CONTENT = "content"
    KEYWORDS = "keywords"
    MOBILE = "mobile"
    SECURITY = "security"

    @classmethod
    def parse(cls, value: Optional[str]) -> Optional["Category"]:
        """Return the matching category, or None for unknown values."""
        try:
            return cls(value)
        except ValueError:
            return None


@dataclass(frozen=True)
class Issue:
    """A normalized audit issue."""

    title: str
    description: str
    severity: str  # Kept verbatim, see Severity for known values
    location: str
    impact: str
    category: Optional[str] = None
    type: Optional[str] = None  # Raw issue type from the auditor (e.g. 'large-images')

    def to_dict(self) -> dict:
        data = {
            'title': self.title,
            'description': self.description,
            'severity': self.severity,
            'location': self.location,
            'impact': self.impact,
        }
        if self.category is not None:
            data['category'] = self.category
        if self.type is not None:
            data['type'] = self.type
        return data


@dataclass(frozen=True)
class Metric:
    """A normalized measurement shown in a report."""

    name: str
    value: Union[float, int, str]
    unit: str
    description: str
    change: Optional[float] = None

    def to_dict(self) -> dict:
        return {
            'name': self.name,
            'value': self.value,
            'unit': self.unit,
            'change': self.change,
            'description': self.description,
        }


@dataclass(frozen=True)
class Resource:
    """A curated reference link attached to a recommendation."""

    title: str
    url: str

    def to_dict(self) -> dict:
        return {'title': self.title, 'url': self.url}


@dataclass(frozen=True)
class Recommendation:
    """Prioritized action plan for one issue category."""

    title: str
    description: str
    category: str
    impact: int  # 1-5
    steps: tuple[str, ...] = ()
    resources: tuple[Resource, ...] = ()

    def __post_init__(self):
        clamped = max(MIN_IMPACT, min(MAX_IMPACT, int(self.impact)))
        object.__setattr__(self, 'impact', clamped)
        object.__setattr__(self, 'steps', tuple(self.steps))
        object.__setattr__(self, 'resources', tuple(self.resources))

    def to_dict(self) -> dict:
        return {
            'title': self.title,
            'description': self.description,
            'category': self.category,
            'impact': self.impact,
            'steps': list(self.steps),
            'resources': [resource.to_dict() for resource in self.resources],
        }


# ============================================================================
# Distribution Models
# ============================================================================

@dataclass(frozen=True)
class DistributionRange:
    """Half-open score range [min, max)."""
    min: float
    max: float
    label: str

    def contains(self, score: float) -> bool:
        return self.min <= score < self.max

    def to_dict(self) -> dict:
        return {'min': self.min, 'max': self.max, 'label': self.label}


@dataclass(frozen=True)
class DistributionBucket:
    """One range of a distribution with its competitor count."""
    range: DistributionRange
    count: int
    holds_client: bool


@dataclass(frozen=True)
class Percentiles:
    """Competitor percentiles alongside the client score."""
    p25: float
    p50: float
    p75: float
    client: float

    def to_dict(self) -> dict:
        return {'p25': self.p25, 'p50': self.p50, 'p75': self.p75, 'client': self.client}


@dataclass(frozen=True)
class BenchmarkComparison:
    """Where a client score sits within a competitor score population."""

    ranges: tuple[DistributionRange, ...]
    counts: tuple[int, ...]
    client_position: Optional[int]  # None when the client score matches no range
    percentiles: Percentiles

    @property
    def buckets(self) -> list[DistributionBucket]:
        return [
            DistributionBucket(
                range=score_range,
                count=count,
                holds_client=index == self.client_position,
            )
            for index, (score_range, count) in enumerate(zip(self.ranges, self.counts))
        ]

    def to_dict(self) -> dict:
        return {
            'ranges': [score_range.to_dict() for score_range in self.ranges],
            'counts': list(self.counts),
            'clientPosition': self.client_position,
            'percentiles': self.percentiles.to_dict(),
        }


# ============================================================================
# Competitive Benchmark Models
# ============================================================================

@dataclass(frozen=True)
class CompetitorScore:
    """A competitor's score within one category."""
    url: str
    name: str
    score: float

    def to_dict(self) -> dict:
        return {'url': self.url, 'name': self.name, 'score': self.score}


@dataclass(frozen=True)
class CategoryBenchmark:
    """Client vs competitors comparison for one scoring category."""

    category: str
    client_score: float
    competitor_average: float
    client_rank: int
    competitors: tuple[CompetitorScore, ...]
    distribution: BenchmarkComparison

    def to_dict(self) -> dict:
        return {
            'category': self.category,
            'clientScore': self.client_score,
            'competitorAverage': self.competitor_average,
            'clientRank': self.client_rank,
            'competitors': [competitor.to_dict() for competitor in self.competitors],
            'distribution': self.distribution.to_dict(),
        }


@dataclass(frozen=True)
class CompetitiveBenchmark:
    """Benchmark results across all requested categories."""

    client_url: str
    categories: dict[str, CategoryBenchmark] = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {
            'clientUrl': self.client_url,
            'categories': {
                name: benchmark.to_dict() for name, benchmark in self.categories.items()
            },
        }


# ============================================================================
# Report Model
# ============================================================================

@dataclass(frozen=True)
class Report:
    """Assembled SEO report consumed by presentation and export layers."""

    site_url: str
    scan_date: Any  # ISO timestamp string unless the scan supplied its own value
    score: float  # 0-100
    issues: tuple[Issue, ...] = ()
    metrics: Optional[tuple[Metric, ...]] = None
    recommendations: Optional[tuple[Recommendation, ...]] = None

    def to_dict(self) -> dict:
        data = {
            'siteUrl': self.site_url,
            'scanDate': self.scan_date,
            'score': self.score,
            'issues': [issue.to_dict() for issue in self.issues],
        }
        if self.metrics is not None:
            data['metrics'] = [metric.to_dict() for metric in self.metrics]
        if self.recommendations is not None:
            data['recommendations'] = [rec.to_dict() for rec in self.recommendations]
        return data
