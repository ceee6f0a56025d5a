"""
Alpha Hunter - Main Orchestrator
================================
Orchestrates the pipeline:
  Stage 1: Parsing → Stage 2: Cleaning → Stage 3: Alpha Filters →
  Stage 4: Priority Scoring → Stage 5: Aggregation
  Stage 6: Verification runs separately, on demand, per project.

Key properties:
- Stages 1-5 are synchronous and return fresh values; the engine holds
  configuration only, so one engine can serve concurrent requests
- Aggregation sees the full filtered set; only the shortlist is truncated
- Verification is async and bounded by a semaphore for batch runs
"""

import asyncio
import time
from typing import Optional, List

from .errors import EmptyDatasetError, VerificationError
from .exporter import export_projects_csv
from .logging_config import get_logger
from .models.schemas import (
    Project,
    AnalysisResult,
    VerificationResult,
    VerificationStatus,
)
from .models.hunt_config import HuntConfig, create_default_hunt_config
from .config.settings import VERIFICATION_CONFIG
from .stages.stage1_parsing import ParsingStage
from .stages.stage2_cleaning import CleaningStage
from .stages.stage3_filters import AlphaFilterStage
from .stages.stage4_scoring import PriorityScoringStage
from .stages.stage5_aggregation import AggregationStage
from .stages.stage6_verification import VerificationStage

logger = get_logger(__name__)


class AlphaHuntingEngine:
    """
    Main engine that orchestrates all pipeline stages.
    """

    def __init__(
        self,
        config: Optional[HuntConfig] = None,
        llm_api_key: Optional[str] = None,
        llm_provider: Optional[str] = None,
        verifier: Optional[VerificationStage] = None,
    ):
        """
        Initialize the engine.

        Args:
            config: Hunt configuration (uses defaults if not provided)
            llm_api_key: API key for the verification LLM
            llm_provider: LLM provider ("openrouter", "openai" or "anthropic")
            verifier: Pre-built verification stage (overrides key/provider)
        """
        self.config = config or create_default_hunt_config()

        # Initialize stages
        self.parser = ParsingStage()
        self.cleaner = CleaningStage()
        self.filters = AlphaFilterStage(self.config)
        self.scorer = PriorityScoringStage(self.config)
        self.aggregator = AggregationStage(self.config)
        self.verifier = verifier or VerificationStage(api_key=llm_api_key, provider=llm_provider)

    def parse(self, text: str) -> List[Project]:
        """
        Parse raw CSV text into projects.

        Raises:
            SchemaError: if the header row lacks a required column
        """
        return self.parser.process(text)

    def analyze(self, projects: List[Project]) -> AnalysisResult:
        """
        Run cleaning, filtering, scoring and aggregation.

        Args:
            projects: Parsed projects

        Returns:
            AnalysisResult with statistics over every filtered project and
            the top-ranked shortlist
        """
        start_time = time.time()

        # =====================================================================
        # STAGE 2-4: Clean, filter, score
        # =====================================================================
        cleaned = self.cleaner.process(projects)
        filtered = self.filters.process(cleaned)
        prioritized = self.scorer.process(filtered)

        # =====================================================================
        # STAGE 5: Aggregation (pre-truncation)
        # =====================================================================
        result = AnalysisResult(
            summary_statistics=self.aggregator.summarize(prioritized),
            category_analysis=self.aggregator.category_distribution(prioritized),
            launch_status_analysis=self.aggregator.launch_status_distribution(prioritized),
            potential_score_distribution=self.aggregator.score_distribution(prioritized),
            prioritized_projects=prioritized[: self.config.limits.top_projects],
        )

        logger.info(
            "Analyzed %d projects: %d passed filters, returning top %d (%.1fms)",
            len(projects),
            len(prioritized),
            len(result.prioritized_projects),
            (time.time() - start_time) * 1000,
        )
        return result

    def analyze_text(self, text: str) -> AnalysisResult:
        """
        Parse and analyze in one call.

        Raises:
            SchemaError: if the header row lacks a required column
            EmptyDatasetError: if no projects could be parsed
        """
        projects = self.parse(text)
        if not projects:
            raise EmptyDatasetError()
        return self.analyze(projects)

    # =========================================================================
    # Verification
    # =========================================================================

    @staticmethod
    def mark_verifying(project: Project) -> Project:
        """Return a copy flagged as in-flight, for immediate UI feedback"""
        return project.model_copy(
            update={"verification_status": VerificationStatus.VERIFYING}
        )

    @staticmethod
    def apply_verification(project: Project, result: VerificationResult) -> Project:
        """Return a copy of the project carrying the verification result"""
        return project.model_copy(
            update={
                "verification_status": result.verification_status,
                "verification_summary": result.verification_summary,
                "verification_score": result.verification_score,
                "evidence_links": result.evidence_links or None,
            }
        )

    async def verify_project(self, project: Project) -> Project:
        """
        Verify a single project.

        Raises:
            VerificationError: if no LLM client is configured
        """
        result = await self.verifier.verify(project)
        return self.apply_verification(project, result)

    async def verify_projects(
        self,
        projects: List[Project],
        max_concurrency: Optional[int] = None,
    ) -> List[Project]:
        """
        Verify several projects concurrently, preserving input order.

        Args:
            projects: Projects to verify
            max_concurrency: Maximum in-flight LLM calls

        Returns:
            Verified copies, in the same order as the input

        Raises:
            VerificationError: if no LLM client is configured
        """
        if not self.verifier.is_configured:
            raise VerificationError("AI service not initialized. An API key is required.")

        limit = max_concurrency or VERIFICATION_CONFIG["max_concurrency"]
        semaphore = asyncio.Semaphore(max(1, limit))

        async def verify_one(project: Project) -> Project:
            async with semaphore:
                return await self.verify_project(project)

        return list(await asyncio.gather(*(verify_one(p) for p in projects)))

    # =========================================================================
    # Export
    # =========================================================================

    def export_csv(self, projects: List[Project]) -> str:
        """Serialize projects to CSV text"""
        return export_projects_csv(projects)


# =============================================================================
# Convenience Functions
# =============================================================================

def create_engine(
    target_categories: Optional[List[str]] = None,
    min_potential_score: Optional[float] = None,
    top_projects: Optional[int] = None,
    llm_api_key: Optional[str] = None,
) -> AlphaHuntingEngine:
    """
    Factory function to create an engine with common settings.

    Args:
        target_categories: Categories the filter accepts
        min_potential_score: Minimum potential score to pass the filter
        top_projects: Size of the prioritized shortlist
        llm_api_key: API key for the verification LLM

    Returns:
        Configured AlphaHuntingEngine instance
    """
    config = create_default_hunt_config(
        target_categories=target_categories,
        min_potential_score=min_potential_score,
        top_projects=top_projects,
    )
    return AlphaHuntingEngine(config=config, llm_api_key=llm_api_key)


def quick_analyze(text: str) -> AnalysisResult:
    """
    Quick analysis of CSV text with default settings.

    Args:
        text: CSV text, header row first

    Returns:
        AnalysisResult
    """
    engine = AlphaHuntingEngine()
    return engine.analyze(engine.parse(text))
