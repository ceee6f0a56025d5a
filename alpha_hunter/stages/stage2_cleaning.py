"""
Stage 2: Cleaning
=================
Normalizes display fields before filtering:
- Website URLs get an https:// scheme when they lack one
- Category tags are re-joined with a uniform ", " separator
- Potential scores that are NaN, infinite or negative become 0
"""

import math
from typing import List

from ..models.schemas import Project
from ..config.settings import MISSING_VALUE


def clean_url(url: str) -> str:
    if not url or url == MISSING_VALUE:
        return MISSING_VALUE
    if not url.startswith("http"):
        return f"https://{url}"
    return url


def clean_categories(categories: str) -> str:
    if not categories or categories == MISSING_VALUE:
        return categories
    return ", ".join(tag.strip() for tag in categories.split(","))


def clean_score(score: float) -> float:
    if score is None or not math.isfinite(score) or score < 0:
        return 0.0
    return score


class CleaningStage:
    """
    Stage 2: Return cleaned copies of projects. Inputs are never mutated.
    """

    def clean(self, project: Project) -> Project:
        return project.model_copy(
            update={
                "website_url": clean_url(project.website_url),
                "category_tags": clean_categories(project.category_tags),
                "potential_score": clean_score(project.potential_score),
            }
        )

    def process(self, projects: List[Project]) -> List[Project]:
        return [self.clean(p) for p in projects]
