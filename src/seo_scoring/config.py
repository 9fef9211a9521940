from dotenv import load_dotenv
from dataclasses import dataclass
from types import MappingProxyType
from typing import Annotated, Any, Dict, Mapping, Optional
from pathlib import Path
import json
import os

from pydantic import (
    AfterValidator,
    BaseModel,
    ConfigDict,
    Field,
    PlainSerializer,
    model_validator,
)

from seo_scoring.constants import (
    CONTENT_METRIC_WEIGHTS,
    CONTENT_OPTIMAL_RANGES,
    PERFORMANCE_METRIC_WEIGHTS,
    PERFORMANCE_THRESHOLDS_MS,
    SEVERITY_DEDUCTIONS,
    TECHNICAL_METRIC_WEIGHTS,
)

load_dotenv()  # Loads variables from .env file


@dataclass
class Config:
    """Runtime configuration for the command line wrapper."""
    log_level: str = "INFO"
    log_file: Optional[str] = None
    profile_path: Optional[str] = None

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables.

        Returns:
            Config: Configuration instance with values from environment
        """
        return cls(
            log_level=os.getenv("SEO_SCORING_LOG_LEVEL", "INFO"),
            log_file=os.getenv("SEO_SCORING_LOG_FILE"),
            profile_path=os.getenv("SEO_SCORING_PROFILE"),
        )


# --- Immutable scorer configuration ---

def freeze_mapping(value: Mapping[str, Any]) -> Mapping[str, Any]:
    """Read-only copy of a mapping, so shared configs cannot be edited in place."""
    return MappingProxyType(dict(value))


def thaw_mapping(value: Mapping[str, Any]) -> Dict[str, Any]:
    return {
        name: item.model_dump() if isinstance(item, BaseModel) else item
        for name, item in value.items()
    }


class OptimalRange(BaseModel):
    """Inclusive [min, max] range where a content metric scores 100."""

    model_config = ConfigDict(frozen=True)

    min: float = Field(gt=0, description="Lower bound of the optimal range")
    max: float = Field(gt=0, description="Upper bound of the optimal range")

    @model_validator(mode="after")
    def check_order(self) -> "OptimalRange":
        if self.min > self.max:
            raise ValueError(f"min ({self.min}) must not exceed max ({self.max})")
        return self


class PerformanceThresholds(BaseModel):
    """Millisecond thresholds for a timing metric, lower is better."""

    model_config = ConfigDict(frozen=True)

    good: float = Field(gt=0)
    medium: float = Field(gt=0)
    poor: float = Field(gt=0)

    @model_validator(mode="after")
    def check_order(self) -> "PerformanceThresholds":
        if not self.good < self.medium < self.poor:
            raise ValueError("thresholds must satisfy good < medium < poor")
        return self


Weights = Annotated[
    Mapping[str, float],
    AfterValidator(freeze_mapping),
    PlainSerializer(thaw_mapping),
]
OptimalRanges = Annotated[
    Mapping[str, OptimalRange],
    AfterValidator(freeze_mapping),
    PlainSerializer(thaw_mapping),
]
ThresholdTable = Annotated[
    Mapping[str, PerformanceThresholds],
    AfterValidator(freeze_mapping),
    PlainSerializer(thaw_mapping),
]


class TechnicalScoringConfig(BaseModel):
    """Weights for the technical score (seoHealth section)."""

    model_config = ConfigDict(frozen=True)

    weights: Weights = Field(
        default_factory=lambda: dict(TECHNICAL_METRIC_WEIGHTS),
        validate_default=True,
        description="Metric name -> weight; names starting with 'missing' are inverted"
    )


class ContentScoringConfig(BaseModel):
    """Weights and optimal ranges for the content score (contentStats section)."""

    model_config = ConfigDict(frozen=True)

    weights: Weights = Field(
        default_factory=lambda: dict(CONTENT_METRIC_WEIGHTS),
        validate_default=True,
    )
    optimal_ranges: OptimalRanges = Field(
        default_factory=lambda: {
            name: OptimalRange(min=low, max=high)
            for name, (low, high) in CONTENT_OPTIMAL_RANGES.items()
        },
        validate_default=True,
    )


class PerformanceScoringConfig(BaseModel):
    """Weights and timing thresholds for the performance score."""

    model_config = ConfigDict(frozen=True)

    weights: Weights = Field(
        default_factory=lambda: dict(PERFORMANCE_METRIC_WEIGHTS),
        validate_default=True,
    )
    thresholds: ThresholdTable = Field(
        default_factory=lambda: {
            name: PerformanceThresholds(good=good, medium=medium, poor=poor)
            for name, (good, medium, poor) in PERFORMANCE_THRESHOLDS_MS.items()
        },
        validate_default=True,
    )


class OverallScoringConfig(BaseModel):
    """Points deducted from 100 per issue of each severity."""

    model_config = ConfigDict(frozen=True)

    deductions: Weights = Field(
        default_factory=lambda: dict(SEVERITY_DEDUCTIONS),
        validate_default=True,
    )


class ScoringProfile(BaseModel):
    """All scorer configurations bundled together."""

    model_config = ConfigDict(frozen=True)

    technical: TechnicalScoringConfig = Field(default_factory=TechnicalScoringConfig)
    content: ContentScoringConfig = Field(default_factory=ContentScoringConfig)
    performance: PerformanceScoringConfig = Field(default_factory=PerformanceScoringConfig)
    overall: OverallScoringConfig = Field(default_factory=OverallScoringConfig)

    @classmethod
    def from_file(cls, path: str) -> "ScoringProfile":
        """Load a scoring profile from a JSON configuration file.

        Sections that are absent keep their defaults. A missing file yields
        the default profile.

        Args:
            path: Path to JSON configuration file

        Returns:
            ScoringProfile with values from file
        """
        file_path = Path(path)

        if not file_path.exists():
            return cls()

        with open(file_path, 'r') as f:
            config = json.load(f)

        if isinstance(config, dict):
            config = config.get('scoring', config)
        return cls.model_validate(config)

    def to_dict(self) -> dict:
        """Convert the profile to a JSON-compatible dictionary."""
        return self.model_dump()

    def save_to_file(self, path: str) -> None:
        """Save the profile to a JSON file.

        Args:
            path: Path to save configuration
        """
        with open(path, 'w') as f:
            json.dump({'scoring': self.to_dict()}, f, indent=2)


# Global default scorer configurations
DEFAULT_TECHNICAL_CONFIG = TechnicalScoringConfig()
DEFAULT_CONTENT_CONFIG = ContentScoringConfig()
DEFAULT_PERFORMANCE_CONFIG = PerformanceScoringConfig()
DEFAULT_OVERALL_CONFIG = OverallScoringConfig()
default_profile = ScoringProfile()
