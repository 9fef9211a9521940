"""Assemble scan results into a Report."""

from datetime import datetime, timezone
from typing import Any, Mapping, Optional

from seo_scoring.config import ScoringProfile, default_profile
from seo_scoring.constants import DEFAULT_SITE_URL
from seo_scoring.exceptions import MissingInputError
from seo_scoring.issue_scoring import calculate_overall_score
from seo_scoring.logging_config import get_logger
from seo_scoring.models import Report
from seo_scoring.normalizers import normalize_issues, normalize_metrics
from seo_scoring.recommendations import generate_recommendations

logger = get_logger(__name__)


class ReportGenerator:
    """Builds Report values from raw scan results."""

    def __init__(self, profile: Optional[ScoringProfile] = None):
        """Initialize the generator.

        Args:
            profile: Scoring profile; defaults to the built-in weights
        """
        self.profile = profile or default_profile

    def generate(
        self,
        scan_results: Optional[Mapping[str, Any]],
        include_metrics: bool = True,
        include_recommendations: bool = True,
    ) -> Report:
        """Generate a report from raw scan results.

        Args:
            scan_results: Raw scan results (siteUrl, scanDate, issues, metrics, ...)
            include_metrics: Whether to include normalized metrics
            include_recommendations: Whether to include recommendations

        Returns:
            Report with score, normalized issues and the optional sections

        Raises:
            MissingInputError: If scan_results is not supplied
        """
        if not isinstance(scan_results, Mapping):
            raise MissingInputError('scan_results')

        issues = scan_results.get('issues') or []

        report = Report(
            site_url=scan_results.get('siteUrl') or DEFAULT_SITE_URL,
            scan_date=scan_results.get('scanDate') or datetime.now(timezone.utc).isoformat(),
            score=calculate_overall_score(scan_results, self.profile.overall),
            issues=tuple(normalize_issues(issues)),
            metrics=(
                tuple(normalize_metrics(scan_results.get('metrics') or []))
                if include_metrics else None
            ),
            recommendations=(
                tuple(generate_recommendations(issues))
                if include_recommendations else None
            ),
        )

        logger.info(
            f"Generated report for {report.site_url}: score {report.score}, "
            f"{len(report.issues)} issues"
        )
        return report


def generate_report_data(
    scan_results: Optional[Mapping[str, Any]],
    include_metrics: bool = True,
    include_recommendations: bool = True,
    profile: Optional[ScoringProfile] = None,
) -> Report:
    """Generate a report with a one-off ReportGenerator."""
    return ReportGenerator(profile).generate(
        scan_results,
        include_metrics=include_metrics,
        include_recommendations=include_recommendations,
    )
