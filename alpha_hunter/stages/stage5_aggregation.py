"""
Stage 5: Aggregation
====================
Summary statistics and chart distributions over the filtered, scored set
(before it is truncated to the top projects).
"""

import math
from collections import Counter
from decimal import Decimal, ROUND_HALF_UP
from typing import List, Optional

from ..models.schemas import Project, ChartData, SummaryStatistics
from ..models.hunt_config import HuntConfig, AnalysisLimits

_CENTS = Decimal("0.01")


def round_half_up(value: float) -> float:
    """Two decimals, exact halves of the binary value rounded up"""
    return float(Decimal(value).quantize(_CENTS, rounding=ROUND_HALF_UP))


class AggregationStage:
    """
    Stage 5: Compute summary statistics and three distributions.
    """

    def __init__(self, config: Optional[HuntConfig] = None):
        self.limits = config.limits if config else AnalysisLimits()

    def summarize(self, projects: List[Project]) -> SummaryStatistics:
        total = len(projects)
        if total:
            average = sum(p.potential_score for p in projects) / total
        else:
            average = 0.0

        high_min = self.limits.high_potential_min
        medium_min = self.limits.medium_potential_min
        keyword = self.limits.upcoming_keyword

        return SummaryStatistics(
            total_projects=total,
            average_potential_score=round_half_up(average),
            high_potential_projects=sum(1 for p in projects if p.potential_score >= high_min),
            medium_potential_projects=sum(
                1 for p in projects if medium_min <= p.potential_score < high_min
            ),
            upcoming_projects=sum(1 for p in projects if keyword in p.launch_status.lower()),
        )

    def category_distribution(self, projects: List[Project]) -> List[ChartData]:
        """Count each tag across projects, most common first, capped"""
        counts = Counter()
        for project in projects:
            for tag in project.category_tags.split(","):
                tag = tag.strip()
                if tag:
                    counts[tag] += 1

        # Stable sort keeps first-seen order among equal counts
        ordered = sorted(counts.items(), key=lambda item: item[1], reverse=True)
        return [
            ChartData(label=label, value=value)
            for label, value in ordered[: self.limits.top_categories]
        ]

    def launch_status_distribution(self, projects: List[Project]) -> List[ChartData]:
        counts = Counter(p.launch_status for p in projects)
        return [ChartData(label=label, value=value) for label, value in counts.items()]

    def score_distribution(self, projects: List[Project]) -> List[ChartData]:
        """Bucket scores by their integer part, ascending"""
        counts = Counter(math.floor(p.potential_score) for p in projects)
        return [
            ChartData(label=f"{bucket}.x", value=counts[bucket])
            for bucket in sorted(counts)
        ]
