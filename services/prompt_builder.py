"""Prompt construction for weekly plan generation.

`build_prompt` is pure: the same profile always renders the same text.
Profile values are embedded as given; nothing is clamped or recalculated
here because calorie and macro math is left to the model.

The output schema shown to the model is built from `OUTPUT_SCHEMA`, whose
keys must match `services.field_mapping.PLAN_DOCUMENT_MAP`.
"""

import json

from schemas.profile_schema import Profile

COACH_PERSONA = (
    "You are NutriStrong, an advanced AI Fitness Coach Engine specialized in "
    "hypertrophy and body recomposition."
)

TRAINING_PREFERENCE = """USER TRAINING PREFERENCE (Hypertrophy Style):
- The user prefers high-stimulus, hypertrophy-focused training.
- Example exercises they like: Dumbbell Incline Press (3x8), Pec Deck Fly (3x8), Incline Curls (3x8), Bayesian Curls (3x8), Overhead Extensions (3x8).
- USE THIS STYLE for the generated workouts. Focus on controlled eccentrics, full range of motion, and muscle isolation mixed with compound movements."""

TASKS = """YOUR TASKS:
1. CALCULATION: Calculate BMR and TDEE based on stats. Set daily calorie target for their goal (Deficit for fat loss, Surplus for muscle).
2. MACROS: Set High Protein (approx 2g per kg of bodyweight). Split remaining calories between Carbs and Fats suitable for training fuel.
3. MEAL PLAN (7 DAYS):
   - Generate a UNIQUE meal plan for Monday through Sunday.
   - DO NOT REPEAT MEALS. Every day must have different recipes to prevent boredom.
   - 4 meals per day: Breakfast, Lunch, Dinner, Snack.
4. WORKOUT PLAN (5-DAY SPLIT):
   - Schedule: Monday (Push), Tuesday (Pull), Wednesday (Legs), Thursday (Upper Body), Friday (Lower Body), Saturday (Rest), Sunday (Rest).
   - Volume: 5-7 exercises per workout.
   - Rep Ranges: 8-12 for hypertrophy, 12-15 for isolation.
5. SHOPPING LIST: Consolidate ingredients for the generated meals."""

_MACROS = {"protein": "Number", "carbs": "Number", "fats": "Number"}


def _meal(name):
    return {"name": name, "calories": "Number", "macros": _MACROS, "ingredients": ["Item 1", "Item 2"]}


OUTPUT_SCHEMA = {
    "summary": "Short 1-sentence analysis of the plan strategy.",
    "daily_calories": "Number",
    "macros": _MACROS,
    "weekly_workouts": [
        {
            "day_name": "Monday",
            "focus": "Push (Chest/Shoulders/Triceps)",
            "duration_minutes": "Number",
            "exercises": [
                {"name": "Exercise Name", "sets": "Number", "reps": "String (e.g. 3x8)", "description": "Form cue"}
            ],
        }
    ],
    "weekly_meals": [
        {
            "day_name": "Monday",
            "breakfast": _meal("Meal Name"),
            "lunch": _meal("Meal Name"),
            "dinner": _meal("Meal Name"),
            "snack": _meal("Meal Name"),
        }
    ],
    "shopping_list": ["Item 1", "Item 2"],
}


def _number(value) -> str:
    """Render 175.0 as '175' and 82.5 as '82.5'."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def render_output_schema() -> str:
    schema = json.dumps(OUTPUT_SCHEMA, indent=2)
    return (
        "OUTPUT FORMAT (Strict JSON only: no markdown, no code fences, no text before or after the object).\n"
        'Fields shown as "Number" must be JSON numbers. Each array shows one element; '
        "weekly_workouts and weekly_meals must contain all 7 days, Monday through Sunday.\n"
        f"{schema}"
    )


def build_prompt(profile: Profile) -> str:
    """Render the generation prompt for ``profile``."""
    profile_block = "\n".join([
        "USER PROFILE:",
        f"- Age: {profile.age}",
        f"- Gender: {profile.gender.value}",
        f"- Height: {_number(profile.height_cm)}cm",
        f"- Weight: {_number(profile.weight_kg)}kg",
        f"- Goal: {profile.goal.value} (Adjust calories/macros accordingly)",
        f"- Activity: {profile.activity_level}",
        f"- Diet Constraints: {profile.dietary_restrictions or 'None'}",
        f"- Allergies: {profile.allergies or 'None'}",
    ])
    return "\n\n".join([COACH_PERSONA, profile_block, TRAINING_PREFERENCE, TASKS, render_output_schema()])
