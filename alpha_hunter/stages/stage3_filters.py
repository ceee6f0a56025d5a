"""
Stage 3: Alpha Hunting Filters
==============================
Narrows cleaned projects to high-signal candidates.

Filters (all must pass, evaluated in order, first failure short-circuits):
- Potential score at or above the minimum (default 6)
- Launch status mentions a launch keyword or starts like a date/quarter
- Category tags contain a target category (case-sensitive substring)
"""

import re
from collections import Counter
from typing import Callable, List, Optional, Tuple

from ..logging_config import get_logger
from ..models.schemas import Project, FilterResult
from ..models.hunt_config import HuntConfig, FilterConfig
from ..config.settings import MISSING_VALUE

logger = get_logger(__name__)


class AlphaFilterStage:
    """
    Stage 3: Apply the alpha hunting filters as an ordered list of predicates.
    """

    def __init__(self, config: Optional[HuntConfig] = None):
        """
        Initialize with hunt configuration or use defaults.
        """
        self.filters = config.filters if config else FilterConfig()
        self._launch_keywords = [k.lower() for k in self.filters.launch_keywords]
        self._date_like = re.compile(self.filters.date_like_pattern)

        self.predicates: List[Tuple[str, Callable[[Project], dict]]] = [
            ("potential_score", self._check_potential_score),
            ("launch_status", self._check_launch_status),
            ("category", self._check_category),
        ]

    def evaluate(self, project: Project) -> FilterResult:
        """
        Run every predicate against one project.

        Args:
            project: Cleaned project

        Returns:
            FilterResult naming the first predicate that rejected it, if any
        """
        checks_performed = 0
        for name, predicate in self.predicates:
            checks_performed += 1
            result = predicate(project)
            if not result["passed"]:
                return FilterResult(
                    passed=False,
                    checked_filters=checks_performed,
                    rejected_by=name,
                    rejection_reason=result["reason"],
                )
        return FilterResult(passed=True, checked_filters=checks_performed)

    def passes(self, project: Project) -> bool:
        return all(predicate(project)["passed"] for _, predicate in self.predicates)

    def process(self, projects: List[Project]) -> List[Project]:
        """Keep projects that pass all filters, preserving input order"""
        kept = []
        rejections = Counter()
        for project in projects:
            result = self.evaluate(project)
            if result.passed:
                kept.append(project)
            else:
                rejections[result.rejected_by] += 1

        logger.debug(
            "Alpha filters kept %d of %d projects (rejected: %s)",
            len(kept), len(projects), dict(rejections),
        )
        return kept

    def _check_potential_score(self, project: Project) -> dict:
        """Check the potential score threshold"""
        minimum = self.filters.min_potential_score
        if project.potential_score >= minimum:
            return {"passed": True, "reason": None}
        return {
            "passed": False,
            "reason": f"Potential score {project.potential_score:g} < {minimum:g}",
        }

    def _check_launch_status(self, project: Project) -> dict:
        """Check that the launch status looks like an active or dated launch"""
        status = project.launch_status
        if not status or status == MISSING_VALUE:
            return {"passed": False, "reason": "No launch status"}

        lower_status = status.lower()
        if any(keyword in lower_status for keyword in self._launch_keywords):
            return {"passed": True, "reason": None}
        if self._date_like.match(status):
            return {"passed": True, "reason": None}

        return {"passed": False, "reason": f"Launch status not tracked: {status}"}

    def _check_category(self, project: Project) -> dict:
        """Check for at least one target category"""
        tags = project.category_tags
        if not tags or tags == MISSING_VALUE:
            return {"passed": False, "reason": "No category tags"}

        # Plain substring match: "AI" also matches inside longer tags
        for category in self.filters.target_categories:
            if category in tags:
                return {"passed": True, "reason": None}

        return {"passed": False, "reason": f"No target category in: {tags}"}
