"""Abstraction over the OpenAI client for JSON-mode completions."""

from __future__ import annotations

import logging
from typing import Any

from openai import OpenAI, OpenAIError
from opentelemetry import trace
from opentelemetry.trace import Status, StatusCode

import config as app_config
from core.errors import AIResponseError, AIUnavailableError
from utils.json_parse import parse_json_object
from utils.retry import OPENAI_RETRY_EXCEPTIONS, retry_with_backoff

logger = logging.getLogger("hiring_wizards.llm")
tracer = trace.get_tracer(__name__)

_CLIENT: OpenAI | None = None


def get_client() -> OpenAI:
    """Return a cached OpenAI client.

    Raises:
        AIUnavailableError: If no API key is configured.
    """

    global _CLIENT
    if not app_config.is_llm_enabled():
        raise AIUnavailableError()
    if _CLIENT is None:
        _CLIENT = OpenAI(
            api_key=app_config.OPENAI_API_KEY,
            base_url=app_config.OPENAI_BASE_URL or None,
            timeout=app_config.OPENAI_REQUEST_TIMEOUT,
        )
    return _CLIENT


def reset_client() -> None:
    global _CLIENT
    _CLIENT = None


def call_json(
    system_prompt: str,
    user_prompt: str,
    *,
    model: str | None = None,
    temperature: float = 0.4,
    client: Any | None = None,
) -> dict[str, Any]:
    """Run a JSON-mode chat completion and return the decoded object.

    Raises:
        AIUnavailableError: When the model cannot be reached after retries.
        AIResponseError: When the response holds no JSON object.
    """

    resolved_client = client or get_client()
    resolved_model = model or app_config.OPENAI_MODEL

    @retry_with_backoff(exceptions=OPENAI_RETRY_EXCEPTIONS, max_tries=3)
    def _run() -> Any:
        return resolved_client.chat.completions.create(
            model=resolved_model,
            temperature=temperature,
            response_format={"type": "json_object"},
            messages=[
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_prompt},
            ],
        )

    with tracer.start_as_current_span("openai.call_json") as span:
        span.set_attribute("llm.model", resolved_model)
        span.set_attribute("llm.temperature", float(temperature))
        try:
            response = _run()
        except OpenAIError as err:
            span.record_exception(err)
            span.set_status(Status(StatusCode.ERROR, str(err)))
            logger.warning("OpenAI request failed: %s", err)
            raise AIUnavailableError() from err

        try:
            content = response.choices[0].message.content or ""
        except (AttributeError, IndexError) as err:
            raise AIResponseError("The model returned no choices.") from err
        try:
            return parse_json_object(content)
        except ValueError as err:
            span.record_exception(err)
            logger.warning("Could not parse model output as JSON: %s", err)
            raise AIResponseError(str(err)) from err


__all__ = ["call_json", "get_client", "reset_client"]
