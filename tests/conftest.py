"""Shared fixtures for the Alpha Hunter test suite."""

from __future__ import annotations

import asyncio

import pytest

from alpha_hunter.errors import VerificationError
from alpha_hunter.models.schemas import (
    EvidenceLink,
    Project,
    VerificationResult,
    VerificationStatus,
)

FOO_CSV = (
    "Project Name,Website,Category Tags,Launch Status,Description,Score,Note\n"
    'Foo,foo.io,"GameFi, DeFi",Upcoming,Desc,9,Note\n'
)

TURKISH_CSV = (
    "\ufeffProje_Adı,Website_URL,Kaynak_Platform,Kategori_Etiketler,"
    "Lansman_Tarihi_Durumu,Ham_Açıklama,Potansiyel_Skoru,Analist_Notu\r\n"
    'Nebula Quest,nebulaquest.gg,X,"GameFi,NFT",Upcoming Q3,"RPG with ""loot""",9,Strong\r\n'
    "GridPower,https://gridpower.network,Discord,\"DePIN, AI\",In Development,Sensors,8.5,Testnet\r\n"
    "SwapLite,swaplite.fi,Telegram,DeFi,Live,AMM,6.5,Crowded\r\n"
    "\r\n"
    "OldChain,N/A,X,Other,Abandoned,Inactive,3,Skip\r\n"
)


@pytest.fixture
def make_project():
    """Build a Project with sensible filter-passing defaults."""

    def _make(**overrides) -> Project:
        values = {
            "project_name": "Foo",
            "website_url": "https://foo.io",
            "category_tags": "GameFi",
            "launch_status": "Upcoming",
            "potential_score": 7.0,
        }
        values.update(overrides)
        return Project(**values)

    return _make


@pytest.fixture
def foo_csv() -> str:
    return FOO_CSV


@pytest.fixture
def turkish_csv() -> str:
    return TURKISH_CSV


class StubVerifier:
    """Async verifier that answers immediately and records concurrency."""

    is_configured = True

    def __init__(self) -> None:
        self.calls = []
        self.in_flight = 0
        self.max_in_flight = 0

    async def verify(self, project: Project) -> VerificationResult:
        self.calls.append(project.project_name)
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        await asyncio.sleep(0)
        self.in_flight -= 1
        return VerificationResult(
            verification_status=VerificationStatus.VERIFIED,
            verification_summary=f"{project.project_name} is live.",
            verification_score=80,
            evidence_links=[EvidenceLink(title="Site", uri=project.website_url)],
        )


class UnconfiguredVerifier:
    is_configured = False

    async def verify(self, project: Project) -> VerificationResult:
        raise VerificationError("AI service not initialized. An API key is required.")


@pytest.fixture
def stub_verifier() -> StubVerifier:
    return StubVerifier()


@pytest.fixture
def unconfigured_verifier() -> UnconfiguredVerifier:
    return UnconfiguredVerifier()
