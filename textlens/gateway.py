import json
import logging
import time
from typing import Any

from pydantic import ValidationError

from textlens import llm
from textlens.errors import ConfigurationError, InputError, ResponseFormatError, TransportError
from textlens.models import AnalysisResult
from textlens.prompts import build_request

log = logging.getLogger(__name__)


def parse_response(raw: str) -> AnalysisResult:
    """Turn the service's text payload into an AnalysisResult.

    Raises ResponseFormatError for anything that is not a JSON document
    matching AnalysisResult. Never returns a partial result.
    """
    try:
        doc = json.loads(raw.strip())
    except json.JSONDecodeError as e:
        raise ResponseFormatError(f"API response is invalid JSON: {e}") from e

    try:
        return AnalysisResult.model_validate(doc)
    except ValidationError as e:
        problems = _format_errors(e)
        log.warning("Response failed validation: %s", "; ".join(problems[:10]))
        raise ResponseFormatError(
            "API response does not match the expected format: " + "; ".join(problems)
        ) from e


def _format_errors(exc: ValidationError) -> list[str]:
    """One "loc: message" line per validation error, loc in wire names."""
    return [
        f"{'.'.join(str(part) for part in err['loc']) or '$'}: {err['msg']}"
        for err in exc.errors()
    ]


async def analyze(source_text: str, client: Any = None) -> AnalysisResult:
    """Run one analysis request against the AI service.

    Exactly one service call per invocation; no retries and no state kept
    between calls. Raises InputError before any network activity when the
    text is blank, TransportError when the call itself fails and
    ResponseFormatError when the reply is unusable.
    """
    if not isinstance(source_text, str) or not source_text.strip():
        raise InputError("Source text is empty")

    prompt, schema = build_request(source_text)
    model = llm.get_model()
    log.info("Analyzing %d chars with %s", len(source_text), model)

    t0 = time.monotonic()
    try:
        raw = await llm.generate_json(prompt, schema, client=client)
    except ConfigurationError:
        raise
    except Exception as e:
        log.exception("AI service call failed")
        raise TransportError(f"AI service call failed: {e}") from e
    elapsed = time.monotonic() - t0
    log.info("Received %d chars in %.2fs", len(raw), elapsed)

    return parse_response(raw)
