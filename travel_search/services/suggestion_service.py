"""LLM-backed travel suggestions with schema validation of the model output."""

from __future__ import annotations

import json
import re
from typing import TypeVar

from openai import OpenAIError
from pydantic import BaseModel, ValidationError

from travel_search.domain.models import DreamDestination, TravelSuggestion
from travel_search.infrastructure.llm_factory import get_llm
from travel_search.infrastructure.logging import get_logger
from travel_search.shared.exceptions import LLMUnavailableError, SuggestionGenerationError

_ModelT = TypeVar("_ModelT", bound=BaseModel)

_FENCE_RE = re.compile(r"^\s*```(?:json)?\s*(?P<body>.*?)\s*```\s*$", re.DOTALL | re.IGNORECASE)

TRAVEL_SUGGESTION_SYSTEM_PROMPT = (
    "You are an expert travel agent. Based on the user's description, provide travel suggestions "
    "in a structured format. Focus on practical, specific recommendations. "
    "Respond with a JSON object with exactly these fields: "
    '"destination" (string), "duration" (string), "budget" (string), '
    '"activities" (array of strings), "transportation" (array of strings), "accommodation" (string).'
)

DREAM_DESTINATION_SYSTEM_PROMPT = (
    "You are a well-travelled travel writer who inspires people to discover new places. "
    "Respond with a JSON object with exactly these fields: "
    '"destination" (string), "description" (string), "activities" (array of strings), '
    '"bestTimeToVisit" (string), "estimatedBudget" (string), "highlights" (array of strings), '
    '"climate" (string), "travelTips" (array of strings).'
)

DREAM_DESTINATION_USER_PROMPT = (
    "Suggest one unique and inspiring dream destination somewhere in the world, "
    "with enough practical detail to start planning a trip."
)


def _strip_fence(text: str) -> str:
    match = _FENCE_RE.match(text)
    return match.group("body") if match else text


def parse_model_output(operation: str, content: str | None, model: type[_ModelT]) -> _ModelT:
    """Decode the completion text and validate it against ``model``."""
    if not content or not content.strip():
        raise SuggestionGenerationError(operation, "No response content received from the model")
    try:
        payload = json.loads(_strip_fence(content))
    except json.JSONDecodeError as exc:
        raise SuggestionGenerationError(operation, f"Model returned invalid JSON: {exc.msg}") from exc
    if not isinstance(payload, dict):
        raise SuggestionGenerationError(operation, "Model returned JSON that is not an object")
    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        fields = ", ".join(".".join(str(p) for p in err["loc"]) for err in exc.errors())
        raise SuggestionGenerationError(operation, f"Model output failed schema validation: {fields}") from exc


def _generate(operation: str, system: str, user: str, model: type[_ModelT]) -> _ModelT:
    log = get_logger()
    llm = get_llm()
    if llm is None:
        err = LLMUnavailableError(operation)
        log.error(operation, str(err))
        raise err

    started_at = log.op_start(operation)
    try:
        log.llm_call(operation, model=llm.model)
        content = llm.complete_json(system, user)
        result = parse_model_output(operation, content, model)
    except SuggestionGenerationError as exc:
        log.error(operation, str(exc))
        log.op_end(operation, started_at, status="error")
        raise
    except OpenAIError as exc:
        log.error(operation, f"{type(exc).__name__}: {exc}")
        log.op_end(operation, started_at, status="error")
        raise SuggestionGenerationError(operation, f"LLM request failed: {type(exc).__name__}") from exc
    log.op_end(operation, started_at, status="ok")
    return result


def get_travel_suggestions(prompt: str) -> TravelSuggestion:
    text = (prompt or "").strip()
    if not text:
        raise ValueError("prompt must not be empty")
    return _generate("travel_suggestions", TRAVEL_SUGGESTION_SYSTEM_PROMPT, text, TravelSuggestion)


def get_dream_destination() -> DreamDestination:
    return _generate(
        "dream_destination",
        DREAM_DESTINATION_SYSTEM_PROMPT,
        DREAM_DESTINATION_USER_PROMPT,
        DreamDestination,
    )


__all__ = ["get_dream_destination", "get_travel_suggestions", "parse_model_output"]
