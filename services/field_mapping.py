"""Field-name translation tables.

Profiles cross two boundaries with different naming: the API model and the
storage row. Plans cross one: the generator's snake_case JSON document and
the camelCase plan model. Each boundary has exactly one table here, and both
directions of the profile mapping read from the same table.
"""

from typing import Any, Callable, Dict, List, NamedTuple, Optional

from schemas.profile_schema import Profile


def split_csv(value: str) -> List[str]:
    """'a, b,,c' -> ['a', 'b', 'c']"""
    if not value:
        return []
    return [part.strip() for part in value.split(",") if part.strip()]


def join_csv(values: Optional[List[str]]) -> str:
    if not values:
        return ""
    return ", ".join(values)


def _same(value: Any) -> Any:
    return value


class FieldMapping(NamedTuple):
    attribute: str
    column: str
    to_storage: Callable[[Any], Any] = _same
    from_storage: Callable[[Any], Any] = _same


PROFILE_STORAGE_MAP = (
    FieldMapping("age", "age"),
    FieldMapping("gender", "gender"),
    FieldMapping("height_cm", "height"),
    FieldMapping("weight_kg", "weight"),
    FieldMapping("goal", "goal"),
    FieldMapping("activity_level", "activity_level"),
    FieldMapping("dietary_restrictions", "diet_preferences", split_csv, join_csv),
    FieldMapping("allergies", "allergies", split_csv, join_csv),
)


def profile_to_storage(profile: Profile) -> Dict[str, Any]:
    """Render a profile as storage column values."""
    values = profile.model_dump(mode="json")
    return {m.column: m.to_storage(values[m.attribute]) for m in PROFILE_STORAGE_MAP}


def profile_from_storage(row: Any) -> Dict[str, Any]:
    """Read profile attributes back from a storage row (ORM object or mapping)."""
    get = row.get if isinstance(row, dict) else lambda column: getattr(row, column, None)
    return {m.attribute: m.from_storage(get(m.column)) for m in PROFILE_STORAGE_MAP}


# Generator document key -> plan field alias.
PLAN_DOCUMENT_MAP = {
    "summary": "summary",
    "daily_calories": "dailyCalories",
    "macros": "macroTarget",
    "weekly_meals": "weeklyMeals",
    "weekly_workouts": "weeklyWorkouts",
    "shopping_list": "shoppingList",
}

# Keys whose absence makes the whole document untrustworthy.
REQUIRED_DOCUMENT_KEYS = ("summary", "daily_calories", "macros")

# Keys that degrade to an empty list when absent or null.
LIST_DOCUMENT_KEYS = ("weekly_meals", "weekly_workouts", "shopping_list")

MEAL_DAY_MAP = {
    "day_name": "dayName",
    "breakfast": "breakfast",
    "lunch": "lunch",
    "dinner": "dinner",
    "snack": "snack",
}

WORKOUT_DAY_MAP = {
    "day_name": "dayName",
    "focus": "focus",
    "duration_minutes": "durationMinutes",
    "exercises": "exercises",
}


def _rename(entry: Any, table: Dict[str, str]) -> Any:
    if not isinstance(entry, dict):
        return entry
    return {target: entry[source] for source, target in table.items() if source in entry}


def map_plan_document(document: Dict[str, Any]) -> Dict[str, Any]:
    """Rename a generator document's keys to plan field aliases.

    Unknown keys are dropped. Missing list keys become empty lists; anything
    else is passed through untouched for the plan model to validate.
    """
    fields = {}
    for source, target in PLAN_DOCUMENT_MAP.items():
        value = document.get(source)
        if source in LIST_DOCUMENT_KEYS and value is None:
            value = []
        elif source not in document:
            continue
        fields[target] = value

    if isinstance(fields.get("weeklyMeals"), list):
        fields["weeklyMeals"] = [_rename(day, MEAL_DAY_MAP) for day in fields["weeklyMeals"]]
    if isinstance(fields.get("weeklyWorkouts"), list):
        fields["weeklyWorkouts"] = [_rename(day, WORKOUT_DAY_MAP) for day in fields["weeklyWorkouts"]]
    return fields
