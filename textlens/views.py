"""Maps each view tab onto exactly one field of an AnalysisResult.

Diagram and chart drawing happen client-side (Mermaid, a bar-chart library);
this module only decides what each of them receives.
"""

from typing import Any, Literal

from pydantic import BaseModel

from textlens.models import AnalysisResult, ViewId

# Leading tokens the diagram renderer accepts.
DIAGRAM_KEYWORDS = ("graph",)

FLOWS_FALLBACK = (
    "Could not generate a flowchart from the provided text. This feature works best "
    "with content describing energy production, demand, and surplus data."
)
VIZ_FALLBACK = "No chart data available."

# (id, tab label, heading) in display order
VIEW_TABS: tuple[tuple[ViewId, str, str], ...] = (
    (ViewId.REFINED, "Refined", "Refined Content"),
    (ViewId.QUESTIONS, "Questions", "Generated Questions"),
    (ViewId.GLOSSARY, "Glossary", "Glossary"),
    (ViewId.ANSWERS, "Answers", "Answers to Your Questions"),
    (ViewId.FLOWS, "Flows", "Energy Flowcharts"),
    (ViewId.VIZ, "Viz", "Data Visualization"),
)
_TITLES = {view: title for view, _label, title in VIEW_TABS}

Mode = Literal["prose", "ordered_list", "definitions", "cards", "diagram", "bar_chart", "fallback"]


class ViewSpec(BaseModel):
    view: ViewId
    title: str
    mode: Mode
    text: str | None = None
    items: list[Any] | None = None
    source: str | None = None
    rows: list[dict[str, Any]] | None = None
    series: list[str] | None = None
    message: str | None = None


def is_renderable_diagram(source: str) -> bool:
    return source.lstrip().startswith(DIAGRAM_KEYWORDS)


def bar_series(rows: list[dict[str, Any]]) -> list[str]:
    """Series names come from the first row only, excluding `name`."""
    if not rows:
        return []
    return [key for key in rows[0] if key != "name"]


def select_view(result: AnalysisResult, view_id: ViewId | str) -> ViewSpec:
    """Pick the field and rendering mode for one tab."""
    view = ViewId(view_id)
    title = _TITLES[view]

    if view is ViewId.REFINED:
        return ViewSpec(view=view, title=title, mode="prose", text=result.refined_content)

    if view is ViewId.QUESTIONS:
        return ViewSpec(
            view=view, title=title, mode="ordered_list", items=list(result.generated_questions)
        )

    if view is ViewId.GLOSSARY:
        return ViewSpec(
            view=view,
            title=title,
            mode="definitions",
            items=[item.model_dump() for item in result.glossary],
        )

    if view is ViewId.ANSWERS:
        return ViewSpec(
            view=view,
            title=title,
            mode="cards",
            items=[ua.model_dump() for ua in result.user_answers],
        )

    if view is ViewId.FLOWS:
        if not is_renderable_diagram(result.energy_flows):
            return ViewSpec(view=view, title=title, mode="fallback", message=FLOWS_FALLBACK)
        return ViewSpec(view=view, title=title, mode="diagram", source=result.energy_flows)

    # ViewId.VIZ
    rows = [row.model_dump() for row in result.chart_data]
    if not rows:
        return ViewSpec(view=view, title=title, mode="fallback", message=VIZ_FALLBACK)
    return ViewSpec(view=view, title=title, mode="bar_chart", rows=rows, series=bar_series(rows))
