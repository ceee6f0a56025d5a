"""Unit tests for CSV export."""

from __future__ import annotations

import csv
import io

from alpha_hunter.exporter import EXPORT_COLUMNS, export_projects_csv, project_to_row
from alpha_hunter.models.schemas import EvidenceLink, VerificationStatus


def test_export_columns_use_canonical_names() -> None:
    assert EXPORT_COLUMNS[:8] == [
        "projectName",
        "websiteUrl",
        "sourcePlatform",
        "categoryTags",
        "launchStatus",
        "rawDescription",
        "potentialScore",
        "analystNote",
    ]
    assert "priorityScore" in EXPORT_COLUMNS
    assert "evidenceLinks" in EXPORT_COLUMNS


def test_project_to_row_formats_values(make_project) -> None:
    project = make_project(
        potential_score=9.0,
        priority_score=9.6,
        verification_status=VerificationStatus.VERIFIED,
        evidence_links=[
            EvidenceLink(title="Site", uri="https://foo.io"),
            EvidenceLink(uri="https://x.com/foo"),
        ],
    )

    row = project_to_row(project)

    assert row["potentialScore"] == "9"
    assert row["priorityScore"] == "9.6"
    assert row["verificationStatus"] == "verified"
    assert row["verificationSummary"] == ""
    assert row["evidenceLinks"] == "https://foo.io; https://x.com/foo"


def test_export_quotes_fields_with_commas_and_quotes(make_project) -> None:
    project = make_project(category_tags="GameFi, DeFi", raw_description='Says "hi"\nTwice')

    text = export_projects_csv([project])

    assert text.startswith(",".join(EXPORT_COLUMNS) + "\n")
    rows = list(csv.DictReader(io.StringIO(text)))
    assert len(rows) == 1
    assert rows[0]["categoryTags"] == "GameFi, DeFi"
    assert rows[0]["rawDescription"] == 'Says "hi"\nTwice'


def test_export_of_no_projects_is_header_only() -> None:
    assert export_projects_csv([]) == ",".join(EXPORT_COLUMNS) + "\n"
