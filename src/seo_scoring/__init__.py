"""SEO audit scoring, benchmarking and recommendation engine."""

__version__ = "0.1.0"

from seo_scoring.scorers import (
    calculate_technical_score,
    calculate_content_score,
    calculate_keyword_score,
    calculate_performance_score,
    calculate_grade,
    get_score_rating,
)
from seo_scoring.normalizers import normalize_issues, normalize_metrics
from seo_scoring.issue_scoring import calculate_overall_score, calculate_impact_score
from seo_scoring.distribution import calculate_distribution, calculate_percentile
from seo_scoring.recommendations import generate_recommendations
from seo_scoring.report_generator import ReportGenerator, generate_report_data
from seo_scoring.benchmark import (
    BenchmarkAnalyzer,
    calculate_category_scores,
    get_domain_from_url,
)
from seo_scoring.models import (
    Severity,
    Category,
    Issue,
    Metric,
    Resource,
    Recommendation,
    DistributionRange,
    DistributionBucket,
    Percentiles,
    BenchmarkComparison,
    CompetitorScore,
    CategoryBenchmark,
    CompetitiveBenchmark,
    Report,
)
from seo_scoring.config import ScoringProfile
from seo_scoring.exceptions import ScoringError, MissingInputError

__all__ = [
    # Scorers
    "calculate_technical_score",
    "calculate_content_score",
    "calculate_keyword_score",
    "calculate_performance_score",
    "calculate_grade",
    "get_score_rating",
    # Normalizers
    "normalize_issues",
    "normalize_metrics",
    # Issue scoring
    "calculate_overall_score",
    "calculate_impact_score",
    # Benchmarking
    "calculate_distribution",
    "calculate_percentile",
    "BenchmarkAnalyzer",
    "calculate_category_scores",
    "get_domain_from_url",
    # Reports
    "generate_recommendations",
    "ReportGenerator",
    "generate_report_data",
    # Models
    "Severity",
    "Category",
    "Issue",
    "Metric",
    "Resource",
    "Recommendation",
    "DistributionRange",
    "DistributionBucket",
    "Percentiles",
    "BenchmarkComparison",
    "CompetitorScore",
    "CategoryBenchmark",
    "CompetitiveBenchmark",
    "Report",
    # Config & errors
    "ScoringProfile",
    "ScoringError",
    "MissingInputError",
]
