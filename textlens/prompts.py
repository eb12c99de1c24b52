import copy
from typing import Any

from textlens.models import AnalysisResult, describe_fields

# JSON schema sent with every request; AnalysisResult also validates the reply.
ANALYSIS_SCHEMA = AnalysisResult.model_json_schema(by_alias=True)

# Asked on every call so answers stay comparable across texts.
FIXED_QUESTIONS = (
    "explique o curtailment para um idiota (explain curtailment for an idiot).",
    "quanto terremos de excedente energetico renovavel ate 2030 "
    "(how much renewable energy surplus will we have by 2030).",
    "quanto podera ser interligado globalmente? (how much can be interconnected globally?).",
)

TASK_TITLES = (
    "Refine Content",
    "Generate Questions",
    "Create Glossary",
    "Answer Specific Questions",
    "Generate Energy Flowcharts",
    "Generate Chart Data",
)

_TEMPLATE = """\
Analyze the following text and perform six tasks. Structure your entire response as a single JSON object matching the provided schema.

TEXT TO ANALYZE:
---
{text}
---

TASKS:
1.  **Refine Content**: Rewrite the text to be clearer, more concise, and well-structured. Correct any grammatical errors. The tone should be informative and professional. Maintain the original language of the text.
2.  **Generate Questions**: Create a list of 5 insightful questions that can be answered from the provided text, to stimulate discussion.
3.  **Create Glossary**: Identify key technical terms and create a glossary. For each term, provide a simple, easy-to-understand definition in the same language as the text.
4.  **Answer Specific Questions**: Provide clear and concise answers to the following specific questions based *only* on the provided text. If the text does not contain enough information to answer a question, state that clearly.
{questions}
5.  **Generate Energy Flowcharts**: Create Mermaid.js graph syntax for two separate flowcharts (one for 2025, one for 2030) that visualize the energy flow from generation to potential surplus and curtailment, based on the data in the text. Use 'graph TD' direction. The syntax for both charts should be in a single string, separated by a newline and each with a title.
6.  **Generate Chart Data**: Extract the data for "Demanda Global", "Capacidade Renovável", and "Excedente Potencial" for the years 2025 and 2030. Format this into a JSON array for a bar chart. Example: [{{ "name": "2025", "Demand": 31000, "Capacity": 40000, "Surplus": 9000 }}, ...]. Use the numeric values from the text.

RESPONSE FIELDS:
{fields}
"""


def _format_questions() -> str:
    return "\n".join(
        f"    - Question {i}: {q}" for i, q in enumerate(FIXED_QUESTIONS, start=1)
    )


def build_prompt(source_text: str) -> str:
    if not isinstance(source_text, str):
        raise TypeError(f"source_text must be str, got {type(source_text).__name__}")
    return _TEMPLATE.format(
        # str.format does not re-scan substituted values, so braces in the text are safe
        text=source_text,
        questions=_format_questions(),
        fields="\n".join(describe_fields()),
    )


def build_request(source_text: str) -> tuple[str, dict[str, Any]]:
    """Return (prompt, JSON schema) for one analysis request.

    Pure; callers are expected to reject empty text before calling.
    """
    return build_prompt(source_text), copy.deepcopy(ANALYSIS_SCHEMA)
