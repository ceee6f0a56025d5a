"""
Alpha Hunting Configuration Models
"""

from typing import List, Optional, Tuple
from pydantic import BaseModel, Field
from datetime import datetime
import uuid

from ..config.settings import (
    DEFAULT_FILTERS,
    DEFAULT_PRIORITY_WEIGHTS,
    DEFAULT_ANALYSIS_LIMITS,
    LAUNCH_PRIORITY_TIERS,
    LAUNCH_PRIORITY_DEFAULT,
    CATEGORY_PRIORITY_TIERS,
    CATEGORY_PRIORITY_DEFAULT,
)


class FilterConfig(BaseModel):
    """Configuration for Stage 3: Alpha Hunting Filters"""
    min_potential_score: float = DEFAULT_FILTERS["min_potential_score"]
    launch_keywords: List[str] = Field(
        default_factory=lambda: list(DEFAULT_FILTERS["launch_keywords"])
    )
    date_like_pattern: str = DEFAULT_FILTERS["date_like_pattern"]
    target_categories: List[str] = Field(
        default_factory=lambda: list(DEFAULT_FILTERS["target_categories"])
    )


class PriorityWeights(BaseModel):
    """Weights for each component of the priority score"""
    potential: float = DEFAULT_PRIORITY_WEIGHTS["potential"]
    launch: float = DEFAULT_PRIORITY_WEIGHTS["launch"]
    category: float = DEFAULT_PRIORITY_WEIGHTS["category"]


class PriorityTier(BaseModel):
    """Keywords that earn a fixed priority value"""
    keywords: List[str]
    priority: float


def _tiers(table: List[Tuple[List[str], float]]) -> List[PriorityTier]:
    return [PriorityTier(keywords=list(k), priority=p) for k, p in table]


class ScoringConfig(BaseModel):
    """Configuration for Stage 4: Priority Scoring"""
    weights: PriorityWeights = Field(default_factory=PriorityWeights)
    launch_tiers: List[PriorityTier] = Field(
        default_factory=lambda: _tiers(LAUNCH_PRIORITY_TIERS)
    )
    launch_default: float = LAUNCH_PRIORITY_DEFAULT
    category_tiers: List[PriorityTier] = Field(
        default_factory=lambda: _tiers(CATEGORY_PRIORITY_TIERS)
    )
    category_default: float = CATEGORY_PRIORITY_DEFAULT


class AnalysisLimits(BaseModel):
    """Limits and thresholds for Stage 5: Aggregation"""
    top_projects: int = DEFAULT_ANALYSIS_LIMITS["top_projects"]
    top_categories: int = DEFAULT_ANALYSIS_LIMITS["top_categories"]
    high_potential_min: float = DEFAULT_ANALYSIS_LIMITS["high_potential_min"]
    medium_potential_min: float = DEFAULT_ANALYSIS_LIMITS["medium_potential_min"]
    upcoming_keyword: str = DEFAULT_ANALYSIS_LIMITS["upcoming_keyword"]


class HuntConfig(BaseModel):
    """Complete Alpha Hunting Configuration"""
    hunt_id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    name: str = "Default Alpha Hunt"
    description: Optional[str] = None

    filters: FilterConfig = Field(default_factory=FilterConfig)
    scoring: ScoringConfig = Field(default_factory=ScoringConfig)
    limits: AnalysisLimits = Field(default_factory=AnalysisLimits)

    created_at: datetime = Field(default_factory=datetime.utcnow)


def create_default_hunt_config(
    target_categories: Optional[List[str]] = None,
    min_potential_score: Optional[float] = None,
    top_projects: Optional[int] = None,
) -> HuntConfig:
    """
    Factory function to create a hunt config with sensible defaults
    """
    config = HuntConfig()

    if target_categories:
        config.filters.target_categories = target_categories

    if min_potential_score is not None:
        config.filters.min_potential_score = min_potential_score

    if top_projects is not None:
        config.limits.top_projects = top_projects

    return config
