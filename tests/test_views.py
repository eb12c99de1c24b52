"""Tests for the view selector."""

import pytest

from textlens.models import AnalysisResult, ViewId
from textlens.views import (
    FLOWS_FALLBACK,
    VIEW_TABS,
    VIZ_FALLBACK,
    bar_series,
    is_renderable_diagram,
    select_view,
)


def _result(payload, **overrides) -> AnalysisResult:
    return AnalysisResult.model_validate({**payload, **overrides})


def test_refined_view_is_prose(valid_payload):
    spec = select_view(_result(valid_payload), "refined")

    assert spec.mode == "prose"
    assert spec.text == valid_payload["refinedContent"]
    assert spec.title == "Refined Content"


def test_questions_view_is_ordered_list(valid_payload):
    spec = select_view(_result(valid_payload), ViewId.QUESTIONS)

    assert spec.mode == "ordered_list"
    assert spec.items == valid_payload["generatedQuestions"]


def test_glossary_and_answers_views(valid_payload):
    result = _result(valid_payload)

    glossary = select_view(result, "glossary")
    answers = select_view(result, "answers")

    assert glossary.mode == "definitions"
    assert glossary.items == valid_payload["glossary"]
    assert answers.mode == "cards"
    assert answers.items == valid_payload["userAnswers"]


@pytest.mark.parametrize("view", ["questions", "glossary", "answers"])
def test_empty_lists_render_empty(valid_payload, view):
    result = _result(valid_payload, generatedQuestions=[], glossary=[], userAnswers=[])

    spec = select_view(result, view)

    assert spec.items == []
    assert spec.message is None


def test_flows_falls_back_for_non_diagram(valid_payload):
    spec = select_view(_result(valid_payload, energyFlows="not a diagram"), "flows")

    assert spec.mode == "fallback"
    assert spec.message == FLOWS_FALLBACK
    assert spec.source is None


def test_flows_passes_diagram_source_unchanged(valid_payload):
    spec = select_view(_result(valid_payload, energyFlows="graph TD; A-->B"), "flows")

    assert spec.mode == "diagram"
    assert spec.source == "graph TD; A-->B"


@pytest.mark.parametrize(
    "source,expected",
    [
        ("graph TD; A-->B", True),
        ("  \ngraph LR\nA-->B", True),
        ("flowchart TD", False),
        ("```mermaid\ngraph TD```", False),
        ("Graph TD", False),
    ],
)
def test_is_renderable_diagram(source, expected):
    assert is_renderable_diagram(source) is expected


def test_viz_derives_series_from_first_row(valid_payload):
    spec = select_view(_result(valid_payload), "viz")

    assert spec.mode == "bar_chart"
    assert spec.series == ["Demand", "Capacity", "Surplus"]
    assert spec.rows == valid_payload["chartData"]


def test_viz_ignores_keys_only_on_later_rows(valid_payload):
    rows = [{"name": "2025", "Demand": 1}, {"name": "2030", "Demand": 2, "Exports": 3}]

    spec = select_view(_result(valid_payload, chartData=rows), "viz")

    assert spec.series == ["Demand"]
    assert spec.rows == rows


def test_viz_empty_shows_message(valid_payload):
    spec = select_view(_result(valid_payload, chartData=[]), "viz")

    assert spec.mode == "fallback"
    assert spec.message == VIZ_FALLBACK
    assert spec.rows is None


def test_bar_series_without_rows():
    assert bar_series([]) == []


def test_unknown_view_is_rejected(valid_payload):
    with pytest.raises(ValueError):
        select_view(_result(valid_payload), "summary")


def test_tabs_cover_every_view_once():
    assert [view for view, _label, _title in VIEW_TABS] == list(ViewId)
