import logging
from typing import Any

from openai import AsyncAzureOpenAI, AsyncOpenAI

from textlens.config import settings
from textlens.errors import ConfigurationError

log = logging.getLogger(__name__)

_client: AsyncOpenAI | None = None
_model: str = settings.openai.model

# Models offered in the settings endpoint.
AVAILABLE_MODELS = [
    "gpt-4o-mini",
    "gpt-4o",
    "gpt-4.1-mini",
    "gpt-4.1",
    "gpt-5-mini",
]

# Models that require max_completion_tokens instead of max_tokens.
_USES_MAX_COMPLETION_TOKENS = {"gpt-5", "gpt-5-mini", "gpt-5-nano", "gpt-5.1", "gpt-5.2",
                                "o1", "o1-mini", "o1-pro", "o3", "o3-mini", "o4-mini"}

SCHEMA_NAME = "analysis_result"


def _needs_max_completion_tokens(model: str) -> bool:
    """Check if a model uses the newer max_completion_tokens parameter."""
    m = model.lower()
    for prefix in _USES_MAX_COMPLETION_TOKENS:
        if m == prefix or m.startswith(prefix + "-"):
            return True
    return False


def check_configuration() -> None:
    """Raise ConfigurationError if the service credential is missing."""
    cfg = settings.openai
    if not cfg.api_key.strip():
        raise ConfigurationError(
            "TEXTLENS_OPENAI__API_KEY environment variable is not set."
        )


def get_client() -> AsyncOpenAI:
    global _client
    if _client is None:
        check_configuration()
        cfg = settings.openai
        if cfg.is_azure:
            _client = AsyncAzureOpenAI(
                azure_endpoint=cfg.endpoint,
                api_key=cfg.api_key,
                api_version=cfg.api_version,
            )
        else:
            _client = AsyncOpenAI(api_key=cfg.api_key)
    return _client


def get_model() -> str:
    return _model


def set_model(name: str) -> None:
    global _model
    if name not in AVAILABLE_MODELS:
        raise ValueError(
            f"Unknown model: {name}. Available: {', '.join(AVAILABLE_MODELS)}"
        )
    _model = name
    log.info("Model changed to: %s", name)


def build_kwargs(prompt: str, schema: dict[str, Any], model: str) -> dict[str, Any]:
    """Request arguments for one structured-output chat completion."""
    cfg = settings.openai
    kwargs: dict[str, Any] = {
        "model": model,
        "messages": [{"role": "user", "content": prompt}],
        "response_format": {
            "type": "json_schema",
            # Not strict: chart rows carry model-chosen numeric keys.
            "json_schema": {"name": SCHEMA_NAME, "schema": schema, "strict": False},
        },
    }
    if _needs_max_completion_tokens(model):
        # gpt-5 / o-series: max_completion_tokens, no temperature control
        kwargs["max_completion_tokens"] = cfg.max_tokens
    else:
        kwargs["max_tokens"] = cfg.max_tokens
        kwargs["temperature"] = cfg.temperature
    return kwargs


async def generate_json(prompt: str, schema: dict[str, Any], client: Any = None) -> str:
    """Send one request asking for JSON that matches `schema`. Returns the raw text."""
    client = client or get_client()
    kwargs = build_kwargs(prompt, schema, _model)
    resp = await client.chat.completions.create(**kwargs)
    choice = resp.choices[0]
    if choice.finish_reason == "length":
        log.warning("Response truncated at %d tokens", settings.openai.max_tokens)
    return choice.message.content or ""
