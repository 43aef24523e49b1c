"""Turn raw language-model replies into trusted structured values.

Nothing in this module raises on a bad reply. A reply that is not JSON, or
JSON of the wrong shape, is logged and replaced with an empty fallback.
"""

import json
import logging

from pydantic import TypeAdapter
from pydantic import ValidationError as SchemaError

from fridge_insights.domain.insights import KpiReport, Recipe
from fridge_insights.errors import MalformedResponseError

_OPENING_FENCES = ("```json", "```JSON", "```")
_CLOSING_FENCE = "```"
_PREVIEW_LENGTH = 200

_RECIPES = TypeAdapter(list[Recipe])

_logger = logging.getLogger(__name__)


def strip_code_fence(text: str) -> str:
    """Remove one leading and one trailing code-fence marker, if present."""
    cleaned = text.strip()
    for fence in _OPENING_FENCES:
        if cleaned.startswith(fence):
            cleaned = cleaned[len(fence) :]
            break
    if cleaned.endswith(_CLOSING_FENCE):
        cleaned = cleaned[: -len(_CLOSING_FENCE)]
    return cleaned.strip()


def parse_model_json(text: object) -> object:
    """Strictly parse a reply, returning the decoded JSON value unchanged."""
    if not isinstance(text, str):
        raise MalformedResponseError(f"Expected text, got {type(text).__name__}")
    try:
        return json.loads(strip_code_fence(text), parse_constant=_reject_constant)
    except (json.JSONDecodeError, RecursionError) as exc:
        raise MalformedResponseError(str(exc)) from exc


def _reject_constant(name: str) -> object:
    raise MalformedResponseError(f"Non-finite number {name} is not valid JSON")


def interpret_recipes(text: object) -> list[Recipe]:
    """Return validated recipes, or an empty list for an unusable reply."""
    try:
        payload = parse_model_json(text)
    except MalformedResponseError as exc:
        _log_malformed("recipes", text, exc)
        return []
    try:
        return _RECIPES.validate_python(payload)
    except SchemaError as exc:
        _log_malformed("recipes", text, exc)
        return []


def interpret_kpis(text: object) -> dict[str, str]:
    """Return validated KPI values, or an empty mapping for an unusable reply."""
    try:
        payload = parse_model_json(text)
    except MalformedResponseError as exc:
        _log_malformed("kpis", text, exc)
        return {}
    try:
        return KpiReport.model_validate(payload).model_dump()
    except SchemaError as exc:
        _log_malformed("kpis", text, exc)
        return {}


def _log_malformed(kind: str, text: object, exc: Exception) -> None:
    preview = text[:_PREVIEW_LENGTH] if isinstance(text, str) else repr(text)
    _logger.warning(
        "Discarding malformed %s reply (%s): %s", kind, type(exc).__name__, preview
    )
