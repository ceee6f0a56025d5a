"""Unit tests for record building and the parsing stage."""

from __future__ import annotations

import math

import pytest

from alpha_hunter.errors import SchemaError
from alpha_hunter.models.schemas import VerificationStatus
from alpha_hunter.stages.stage1_parsing import (
    ParsingStage,
    build_record,
    parse_potential_score,
    resolve_headers,
)


@pytest.fixture
def header_map():
    return resolve_headers(["Project Name", "Score", "Website", "Followers"])


def test_build_record_overrides_defaults_with_bound_cells(header_map) -> None:
    project = build_record(["Foo", "9", "foo.io", "12000"], header_map)

    assert project is not None
    assert project.project_name == "Foo"
    assert project.potential_score == 9.0
    assert project.website_url == "foo.io"
    assert project.category_tags == "N/A"
    assert project.analyst_note == "N/A"
    assert project.priority_score is None
    assert project.verification_status is VerificationStatus.UNVERIFIED


def test_short_row_keeps_defaults(header_map) -> None:
    project = build_record(["Foo"], header_map)

    assert project.potential_score == 0.0
    assert project.website_url == "N/A"


def test_cells_beyond_header_are_ignored(header_map) -> None:
    project = build_record(["Foo", "7", "foo.io", "1", "extra", "more"], header_map)

    assert project.project_name == "Foo"
    assert project.potential_score == 7.0


@pytest.mark.parametrize("name", ["", "   ", "N/A"])
def test_rows_without_project_name_are_discarded(header_map, name: str) -> None:
    assert build_record([name, "9", "foo.io"], header_map) is None


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("7.5", 7.5),
        (" 6 ", 6.0),
        ("8/10", 8.0),
        (".5", 0.5),
        ("1e1", 10.0),
        ("-3", -3.0),
        ("abc", 0.0),
        ("", 0.0),
        ("1e999", 0.0),
    ],
)
def test_parse_potential_score_reads_leading_number(raw: str, expected: float) -> None:
    assert parse_potential_score(raw) == expected


def test_parsing_stage_keeps_input_order_and_drops_nameless_rows() -> None:
    text = "Project Name,Score\nB,5\n,9\nA,garbage\nC,7\n"

    projects = ParsingStage().process(text)

    assert [p.project_name for p in projects] == ["B", "A", "C"]
    assert [p.potential_score for p in projects] == [5.0, 0.0, 7.0]


def test_parsing_stage_returns_empty_list_for_empty_input() -> None:
    assert ParsingStage().process("") == []
    assert ParsingStage().process("\r\n  \n") == []


def test_parsing_stage_header_only_yields_no_projects() -> None:
    assert ParsingStage().process("Project Name,Score\n") == []


def test_parsing_stage_raises_schema_error_on_bad_header() -> None:
    with pytest.raises(SchemaError):
        ParsingStage().process("Name,Website\nFoo,foo.io\n")


def test_malformed_data_rows_never_raise() -> None:
    text = (
        "Project Name,Score,Website\n"
        'Foo,"unterminated,foo.io\n'
        'Bar,""""\n'
        "Baz\n"
        ",,,,,,,\n"
    )

    projects = ParsingStage().process(text)

    assert [p.project_name for p in projects] == ["Foo", "Bar", "Baz"]
    assert all(math.isfinite(p.potential_score) for p in projects)


def test_stray_inch_marks_keep_every_project() -> None:
    text = (
        "Project Name,Description,Score\n"
        'A,Our 5" handheld,9\n'
        "B,plain,8\n"
        "C,plain,7\n"
        'D,a 7" tablet,6\n'
    )

    projects = ParsingStage().process(text)

    assert [p.project_name for p in projects] == ["A", "B", "C", "D"]
    assert [p.potential_score for p in projects[1:3]] == [8.0, 7.0]
