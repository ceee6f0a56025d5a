"""
Stage 4: Priority Scoring
=========================
Deterministic weighted priority for filtered projects.

priority = potential * 0.4 + launch priority * 0.3 + category priority * 0.3

Launch tiers (first match wins):
- upcoming (10) > development/making (8) > early access/alpha/beta (7)
  > live/launched/playable (5) > anything else (3)

Category tiers:
- GameFi/DePIN/AI (10) > DeFi/NFT/Metaverse (7) > anything else (5)
"""

from typing import List, Optional

from ..models.schemas import Project
from ..models.hunt_config import HuntConfig, ScoringConfig


class PriorityScoringStage:
    """
    Stage 4: Attach priority scores and produce a stable ranking.
    """

    def __init__(self, config: Optional[HuntConfig] = None):
        """
        Initialize with hunt configuration or use defaults.
        """
        self.scoring = config.scoring if config else ScoringConfig()
        self.weights = self.scoring.weights

    def launch_priority(self, project: Project) -> float:
        """Priority of the launch stage (lowercase substring match)"""
        lower_status = project.launch_status.lower()
        for tier in self.scoring.launch_tiers:
            if any(keyword in lower_status for keyword in tier.keywords):
                return tier.priority
        return self.scoring.launch_default

    def category_priority(self, project: Project) -> float:
        """Priority of the category mix (case-sensitive substring match)"""
        for tier in self.scoring.category_tiers:
            if any(category in project.category_tags for category in tier.keywords):
                return tier.priority
        return self.scoring.category_default

    def priority_score(self, project: Project) -> float:
        return (
            project.potential_score * self.weights.potential
            + self.launch_priority(project) * self.weights.launch
            + self.category_priority(project) * self.weights.category
        )

    def score(self, projects: List[Project]) -> List[Project]:
        """Return copies of the projects with priority_score attached"""
        return [
            p.model_copy(update={"priority_score": self.priority_score(p)})
            for p in projects
        ]

    def rank(self, projects: List[Project]) -> List[Project]:
        """Sort descending by priority; sorted() is stable so ties keep input order"""
        return sorted(projects, key=lambda p: p.priority_score or 0.0, reverse=True)

    def process(self, projects: List[Project]) -> List[Project]:
        return self.rank(self.score(projects))
