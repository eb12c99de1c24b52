"""
Shared fixtures for textlens tests.

The AI service is replaced by a fake exposing ``chat.completions.create``,
the only surface the gateway touches.
"""

import asyncio
import copy
import json
from types import SimpleNamespace

import pytest

VALID_PAYLOAD = {
    "refinedContent": "Curtailment is the forced reduction of renewable generation.",
    "generatedQuestions": [
        "What is curtailment?",
        "Why do negative prices occur?",
        "Who decides technical curtailment?",
        "How large is the 2030 surplus?",
        "What role does storage play?",
    ],
    "glossary": [
        {"term": "TWh", "definition": "Terawatt-hour."},
        {"term": "BESS", "definition": "Battery Energy Storage System."},
    ],
    "userAnswers": [
        {"question": "Explain curtailment", "answer": "Turning off the tap when the bucket is full."},
        {"question": "Surplus by 2030?", "answer": "About 27,000 TWh."},
        {"question": "Global interconnection?", "answer": "The text does not say."},
    ],
    "energyFlows": "graph TD; A[Renewable Capacity]-->B[Demand]",
    "chartData": [
        {"name": "2025", "Demand": 31000, "Capacity": 40000, "Surplus": 9000},
        {"name": "2030", "Demand": 38000, "Capacity": 65000, "Surplus": 27000},
    ],
}


class FakeCompletions:
    def __init__(self, content: str = "", exc: Exception | None = None, delay: float = 0.0):
        self.content = content
        self.exc = exc
        self.delay = delay
        self.calls: list[dict] = []
        self.in_flight = 0
        self.max_in_flight = 0

    async def create(self, **kwargs):
        self.calls.append(kwargs)
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            await asyncio.sleep(self.delay)
            if self.exc is not None:
                raise self.exc
            message = SimpleNamespace(content=self.content)
            return SimpleNamespace(choices=[SimpleNamespace(message=message, finish_reason="stop")])
        finally:
            self.in_flight -= 1


class FakeClient:
    def __init__(self, **kwargs):
        self.completions = FakeCompletions(**kwargs)
        self.chat = SimpleNamespace(completions=self.completions)


@pytest.fixture
def valid_payload():
    """A fresh copy of a well-formed service reply."""
    return copy.deepcopy(VALID_PAYLOAD)


@pytest.fixture
def make_client():
    """Build a fake AI client. Pass content=dict to have it JSON-encoded."""

    def _make(content="", **kwargs):
        if not isinstance(content, str):
            content = json.dumps(content)
        return FakeClient(content=content, **kwargs)

    return _make
