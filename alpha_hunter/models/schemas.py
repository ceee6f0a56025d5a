"""
Pydantic schemas for Alpha Hunter
"""

from enum import Enum
from typing import List, Mapping, Optional
from pydantic import BaseModel, Field

from ..config.settings import MISSING_VALUE


# =============================================================================
# ENUMS
# =============================================================================

class CanonicalField(str, Enum):
    """The eight fixed project attributes every input column resolves to"""
    PROJECT_NAME = "projectName"
    WEBSITE_URL = "websiteUrl"
    SOURCE_PLATFORM = "sourcePlatform"
    CATEGORY_TAGS = "categoryTags"
    LAUNCH_STATUS = "launchStatus"
    RAW_DESCRIPTION = "rawDescription"
    POTENTIAL_SCORE = "potentialScore"
    ANALYST_NOTE = "analystNote"


class VerificationStatus(str, Enum):
    """Lifecycle of the external legitimacy check"""
    UNVERIFIED = "unverified"
    VERIFYING = "verifying"
    VERIFIED = "verified"
    FAILED = "failed"


# Ordered fields of a tokenized row, no semantic meaning yet
RawRow = List[str]

# Column index -> canonical field, built once from the header row
HeaderMap = Mapping[int, CanonicalField]


# =============================================================================
# PROJECT
# =============================================================================

class EvidenceLink(BaseModel):
    """A web source cited by the verification model"""
    title: str = ""
    uri: str


class Project(BaseModel):
    """A candidate project resolved to the canonical record shape"""
    project_name: str = Field(MISSING_VALUE, alias="projectName")
    website_url: str = Field(MISSING_VALUE, alias="websiteUrl")
    source_platform: str = Field(MISSING_VALUE, alias="sourcePlatform")
    category_tags: str = Field(MISSING_VALUE, alias="categoryTags")
    launch_status: str = Field(MISSING_VALUE, alias="launchStatus")
    raw_description: str = Field(MISSING_VALUE, alias="rawDescription")
    potential_score: float = Field(0.0, alias="potentialScore")
    analyst_note: str = Field(MISSING_VALUE, alias="analystNote")
    priority_score: Optional[float] = Field(None, alias="priorityScore")

    # Verification fields (written only by the verification stage)
    verification_status: VerificationStatus = Field(
        VerificationStatus.UNVERIFIED, alias="verificationStatus"
    )
    verification_summary: Optional[str] = Field(None, alias="verificationSummary")
    verification_score: Optional[int] = Field(None, alias="verificationScore")
    evidence_links: Optional[List[EvidenceLink]] = Field(None, alias="evidenceLinks")

    class Config:
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "projectName": "Foo",
                "websiteUrl": "https://foo.io",
                "sourcePlatform": "X",
                "categoryTags": "GameFi, DeFi",
                "launchStatus": "Upcoming",
                "rawDescription": "On-chain strategy game",
                "potentialScore": 9,
                "analystNote": "Strong team",
                "verificationStatus": "unverified",
            }
        }


# =============================================================================
# STAGE RESULT SCHEMAS
# =============================================================================

class FilterResult(BaseModel):
    """Result of running the alpha hunting filters on one project"""
    passed: bool
    checked_filters: int = 0
    rejected_by: Optional[str] = None
    rejection_reason: Optional[str] = None


class VerificationResult(BaseModel):
    """Result from the verification stage"""
    verification_status: VerificationStatus = Field(alias="verificationStatus")
    verification_summary: Optional[str] = Field(None, alias="verificationSummary")
    verification_score: Optional[int] = Field(None, alias="verificationScore")
    evidence_links: List[EvidenceLink] = Field(default_factory=list, alias="evidenceLinks")

    class Config:
        populate_by_name = True


class ChartData(BaseModel):
    """A single bucket count for a distribution"""
    label: str
    value: int


class SummaryStatistics(BaseModel):
    """Headline numbers for the filtered project set"""
    total_projects: int = Field(0, alias="totalProjects")
    average_potential_score: float = Field(0.0, alias="averagePotentialScore")
    high_potential_projects: int = Field(0, alias="highPotentialProjects")
    medium_potential_projects: int = Field(0, alias="mediumPotentialProjects")
    upcoming_projects: int = Field(0, alias="upcomingProjects")

    class Config:
        populate_by_name = True


# =============================================================================
# UNIFIED OUTPUT SCHEMA
# =============================================================================

class AnalysisResult(BaseModel):
    """Complete analysis: statistics, distributions and the ranked shortlist"""
    summary_statistics: SummaryStatistics = Field(alias="summaryStatistics")
    category_analysis: List[ChartData] = Field(default_factory=list, alias="categoryAnalysis")
    launch_status_analysis: List[ChartData] = Field(
        default_factory=list, alias="launchStatusAnalysis"
    )
    potential_score_distribution: List[ChartData] = Field(
        default_factory=list, alias="potentialScoreDistribution"
    )
    prioritized_projects: List[Project] = Field(
        default_factory=list, alias="prioritizedProjects"
    )

    class Config:
        populate_by_name = True


# =============================================================================
# API REQUEST SCHEMAS
# =============================================================================

class CsvTextRequest(BaseModel):
    """Raw CSV text uploaded for parsing or analysis"""
    csv_text: str = Field(..., description="Full CSV file contents, header row first")

    class Config:
        json_schema_extra = {
            "example": {
                "csv_text": (
                    "Project Name,Website,Category Tags,Launch Status,Description,Score,Note\n"
                    'Foo,foo.io,"GameFi, DeFi",Upcoming,Desc,9,Note'
                )
            }
        }


class VerifyRequest(BaseModel):
    """Request to verify a single project"""
    project: Project


class ExportRequest(BaseModel):
    """Request to export projects as CSV"""
    projects: List[Project]
    filename: Optional[str] = None
