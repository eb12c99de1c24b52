from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictInt, StrictStr, field_validator
from pydantic.alias_generators import to_camel


class ViewId(str, Enum):
    REFINED = "refined"
    QUESTIONS = "questions"
    GLOSSARY = "glossary"
    ANSWERS = "answers"
    FLOWS = "flows"
    VIZ = "viz"


# ── Analysis result ──
#
# These models are the response contract: their JSON schema is sent with the
# request and the same models validate the reply. Unknown keys are ignored;
# declared fields are checked strictly (no str/number coercion).

Number = StrictInt | StrictFloat


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


class GlossaryItem(_Frozen):
    term: StrictStr = Field(description="A key technical term from the text.")
    definition: StrictStr = Field(description="A simple, easy-to-understand definition for the term.")


class UserAnswer(_Frozen):
    question: StrictStr = Field(description="The original question asked by the user.")
    answer: StrictStr = Field(
        description="A clear and concise answer to the user's question, based only on the provided text."
    )


class ChartRow(BaseModel):
    """One bar-chart category, e.g. {"name": "2025", "Demand": 31000, "Capacity": 40000, "Surplus": 9000}.
    Every key besides name is a numeric series value in TWh."""

    model_config = ConfigDict(frozen=True, extra="allow")

    __pydantic_extra__: dict[str, Number]

    name: StrictStr = Field(description="The year, e.g., '2025' or '2030'.")

    @property
    def series_values(self) -> dict[str, int | float]:
        """Series values in the order the generator returned them."""
        return dict(self.__pydantic_extra__ or {})


class AnalysisResult(BaseModel):
    model_config = ConfigDict(frozen=True, alias_generator=to_camel)

    refined_content: StrictStr = Field(
        description="The refined, improved version of the original text, written in a clear and professional tone."
    )
    generated_questions: tuple[StrictStr, ...] = Field(
        description="A list of 5 insightful questions that can be answered from the provided text, to stimulate discussion."
    )
    glossary: tuple[GlossaryItem, ...] = Field(description="A list of key terms and their definitions.")
    user_answers: tuple[UserAnswer, ...] = Field(description="Answers to the user's specific questions.")
    energy_flows: StrictStr = Field(
        description="Mermaid.js 'graph TD' syntax for two separate flowcharts: one for 2025 and one for 2030. "
        "Visualize the energy flow from 'Renewable Capacity' to 'Demand', splitting into 'Energy Used' "
        "and 'Potential Surplus', with the surplus leading to 'Curtailment'. Use data from the text like "
        "'~31,000 TWh Demand' and '~40,000 TWh Capacity' for 2025. The entire output for both charts "
        "must be a single string, with each chart clearly titled."
    )
    chart_data: tuple[ChartRow, ...] = Field(
        description="Structured data for a bar chart comparing energy metrics for 2025 and 2030."
    )

    @field_validator("refined_content", "energy_flows")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be empty")
        return value

    def to_payload(self) -> dict:
        """The camelCase JSON document this result was built from, minus ignored keys."""
        return self.model_dump(by_alias=True, mode="json")


def describe_fields() -> list[str]:
    """One line per top-level response field, used to close the prompt."""
    lines = []
    for field in AnalysisResult.model_fields.values():
        marker = "required" if field.is_required() else "optional"
        lines.append(f'- "{field.alias}" ({marker}): {field.description}')
    return lines


# ── API models ──


class AnalyzeRequest(BaseModel):
    text: str


class SelectViewRequest(BaseModel):
    view: ViewId


class SetModelRequest(BaseModel):
    model: str


class StateResponse(BaseModel):
    status: str
    active_view: ViewId
    result: dict | None = None
    error: str = ""
    elapsed_s: float = 0.0
    model: str = ""
