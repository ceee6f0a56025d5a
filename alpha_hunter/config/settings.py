"""
Configuration settings for Alpha Hunter
"""

from typing import Dict, List, Tuple, Any
import os

# =============================================================================
# LLM CONFIGURATION (OpenRouter)
# =============================================================================

LLM_CONFIG = {
    "provider": os.getenv("LLM_PROVIDER", "openrouter"),  # openrouter, openai, anthropic
    # Empty means the provider's entry in LLM_DEFAULT_MODELS
    "model": os.getenv("LLM_MODEL", ""),
    "api_key": os.getenv("OPENROUTER_API_KEY", ""),
    "base_url": os.getenv("LLM_BASE_URL", "https://openrouter.ai/api/v1"),
    "max_tokens": 600,
    "temperature": 0.2,
    "timeout_seconds": float(os.getenv("LLM_TIMEOUT_SECONDS", "60")),
    # OpenRouter specific headers
    "site_url": os.getenv("OPENROUTER_SITE_URL", "http://localhost:8000"),
    "app_name": os.getenv("OPENROUTER_APP_NAME", "Alpha Hunter"),
}

# Model used when LLM_MODEL is unset, per provider
LLM_DEFAULT_MODELS = {
    # ":online" enables OpenRouter web search so answers carry citations
    "openrouter": "openai/gpt-4o-mini:online",
    "openai": "gpt-4o-mini",
    "anthropic": "claude-sonnet-4-5",
}

# =============================================================================
# LOGGING
# =============================================================================

LOG_CONFIG = {
    "level": os.getenv("LOG_LEVEL", "INFO"),
    "format": "%(asctime)s %(levelname)-5s %(name)s: %(message)s",
    "console_datefmt": "%H:%M:%S",
    "file_datefmt": "%Y-%m-%d %H:%M:%S",
}

# =============================================================================
# HEADER SYNONYMS
# =============================================================================
# Canonical field -> accepted raw header spellings (Turkish and English).
# Order matters: a header cell binds to the first field whose list matches.

HEADER_SYNONYMS: Dict[str, Tuple[str, ...]] = {
    "projectName": ("Proje_Adı", "Proje Adı", "Project Name"),
    "websiteUrl": ("Website_URL", "Website URL", "Website"),
    "sourcePlatform": ("Kaynak_Platform", "Kaynak Platform", "Source Platform", "Source"),
    "categoryTags": (
        "Kategori_Etiketler",
        "Kategori Etiketleri",
        "Category Tags",
        "Categories",
        "Tags",
    ),
    "launchStatus": (
        "Lansman_Tarihi_Durumu",
        "Lansman Tarihi Durumu",
        "Lansman Durumu",
        "Launch Status",
    ),
    "rawDescription": (
        "Ham_Açıklama",
        "Ham Açıklama",
        "Açıklama",
        "Description",
        "Raw Description",
    ),
    "potentialScore": (
        "Potansiyel_Skoru",
        "Potensiyel Skoru",
        "Potential Score",
        "Score",
        "Puan",
    ),
    "analystNote": ("Analist_Notu", "Analist Notu", "Analyst Note", "Note", "Not"),
}

REQUIRED_FIELDS: Tuple[str, ...] = ("projectName", "potentialScore")

# Turkish letters folded to ASCII during header normalization
DIACRITIC_MAP = {
    "ı": "i",
    "ö": "o",
    "ü": "u",
    "ç": "c",
    "ş": "s",
    "ğ": "g",
}

MISSING_VALUE = "N/A"

# =============================================================================
# DEFAULT ALPHA HUNTING FILTERS
# =============================================================================

DEFAULT_FILTERS: Dict[str, Any] = {
    "min_potential_score": 6.0,
    "launch_keywords": [
        "Live",
        "Development",
        "Upcoming",
        "Alpha",
        "Beta",
        "Planned",
        "Launched",
        "Launch",
        "making",
        "Playable",
    ],
    # Statuses that are primarily dates or quarters, e.g. 2025-08-31, 2025-Q3
    "date_like_pattern": r"^\d{4}[-Q]",
    "target_categories": ["GameFi", "DeFi", "DePIN", "NFT", "AI", "Metaverse"],
}

# =============================================================================
# DEFAULT PRIORITY SCORING
# =============================================================================

DEFAULT_PRIORITY_WEIGHTS = {
    "potential": 0.4,
    "launch": 0.3,
    "category": 0.3,
}

# (keywords, priority) evaluated top-down, first match wins
LAUNCH_PRIORITY_TIERS: List[Tuple[List[str], float]] = [
    (["upcoming"], 10.0),
    (["development", "making"], 8.0),
    (["early access", "alpha", "beta"], 7.0),
    (["live", "launched", "playable"], 5.0),
]
LAUNCH_PRIORITY_DEFAULT = 3.0

CATEGORY_PRIORITY_TIERS: List[Tuple[List[str], float]] = [
    (["GameFi", "DePIN", "AI"], 10.0),
    (["DeFi", "NFT", "Metaverse"], 7.0),
]
CATEGORY_PRIORITY_DEFAULT = 5.0

# =============================================================================
# ANALYSIS LIMITS
# =============================================================================

DEFAULT_ANALYSIS_LIMITS = {
    "top_projects": 20,
    "top_categories": 8,
    "high_potential_min": 8.0,
    "medium_potential_min": 6.0,
    "upcoming_keyword": "upcoming",
}

# =============================================================================
# VERIFICATION
# =============================================================================

VERIFICATION_CONFIG = {
    "max_evidence_links": 3,
    "max_concurrency": int(os.getenv("VERIFY_MAX_CONCURRENCY", "3")),
    "failure_summary": (
        "Could not verify project. The API call may have failed "
        "or returned an invalid format."
    ),
}

# =============================================================================
# EXPORT
# =============================================================================

EXPORT_FILENAME = "alpha_filtered_projects.csv"
