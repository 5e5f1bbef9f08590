"""Parsing of raw generator output into a plan.

`normalize` is the only place generator text is trusted into a
`ComprehensivePlan`. It either returns a fully validated plan or the
fallback plan; it never raises and never hands back a partial structure.
"""

import json
import re
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from core.logger import get_logger
from schemas.plan_schema import ComprehensivePlan, MacroSplit
from services.field_mapping import REQUIRED_DOCUMENT_KEYS, map_plan_document

logger = get_logger("services.plan_normalizer")

FALLBACK_PLAN = ComprehensivePlan(
    summary="AI Service unavailable. Displaying emergency protocol.",
    daily_calories=2500,
    macro_target=MacroSplit(protein=180, carbs=250, fats=80),
    weekly_meals=[],
    weekly_workouts=[],
    shopping_list=["System Offline - Please Retry Generation"],
)

_LEADING_FENCE = re.compile(r"^\s*```[a-zA-Z]*[ \t]*\n?")
_TRAILING_FENCE = re.compile(r"\n?[ \t]*```\s*$")


def fallback_plan() -> ComprehensivePlan:
    """Return a copy of the fallback plan, safe for callers to mutate."""
    return FALLBACK_PLAN.model_copy(deep=True)


def is_fallback_plan(plan: ComprehensivePlan) -> bool:
    return plan == FALLBACK_PLAN


def strip_code_fence(raw_text: str) -> str:
    """Remove a surrounding ```json ... ``` wrapper if present."""
    text = _LEADING_FENCE.sub("", raw_text, count=1)
    text = _TRAILING_FENCE.sub("", text, count=1)
    return text.strip()


def normalize(raw_text: Any) -> ComprehensivePlan:
    """Parse generator output into a plan, or return the fallback plan.

    A document that is not JSON, not an object, missing any of
    ``summary``/``daily_calories``/``macros``, or failing plan validation is
    rejected as a whole. Missing meal, workout or shopping lists become
    empty lists.
    """
    if not isinstance(raw_text, str) or not raw_text.strip():
        logger.warning("Empty generator output, using fallback plan")
        return fallback_plan()

    try:
        document = json.loads(strip_code_fence(raw_text))
    except (ValueError, RecursionError) as exc:
        logger.warning("Generator output is not valid JSON (%s), using fallback plan", exc)
        return fallback_plan()

    if not isinstance(document, dict):
        logger.warning("Generator output is %s, not an object, using fallback plan", type(document).__name__)
        return fallback_plan()

    missing = [key for key in REQUIRED_DOCUMENT_KEYS if key not in document]
    if missing:
        logger.warning("Generator output missing %s, using fallback plan", ", ".join(missing))
        return fallback_plan()

    try:
        plan = ComprehensivePlan.model_validate(map_plan_document(document))
    except PydanticValidationError as exc:
        logger.warning("Generator output failed validation with %d error(s), using fallback plan", exc.error_count())
        return fallback_plan()
    except (ValueError, ArithmeticError, RecursionError) as exc:
        logger.warning("Generator output could not be converted (%r), using fallback plan", exc)
        return fallback_plan()

    logger.info(
        "Normalized plan: %d meal day(s), %d workout day(s), %d shopping item(s)",
        len(plan.weekly_meals), len(plan.weekly_workouts), len(plan.shopping_list),
    )
    return plan
