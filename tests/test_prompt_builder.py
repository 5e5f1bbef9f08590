"""Tests for prompt construction."""

from schemas.profile_schema import Gender, Goal, Profile
from services.field_mapping import PLAN_DOCUMENT_MAP
from services.prompt_builder import OUTPUT_SCHEMA, build_prompt


def _profile():
    return Profile(
        age=34,
        gender=Gender.FEMALE,
        height_cm=168.5,
        weight_kg=62,
        goal=Goal.GAIN_MUSCLE,
        activity_level="Very Active",
        dietary_restrictions="vegetarian, low sodium",
        allergies="peanuts",
    )


def test_prompt_contains_every_profile_value():
    profile = _profile()
    prompt = build_prompt(profile)
    for value in ["34", "female", "168.5", "62", "gain_muscle", "Very Active", "vegetarian, low sodium", "peanuts"]:
        assert value in prompt


def test_prompt_is_deterministic():
    assert build_prompt(_profile()) == build_prompt(_profile())


def test_empty_restrictions_render_as_none():
    prompt = build_prompt(Profile())
    assert "- Diet Constraints: None" in prompt
    assert "- Allergies: None" in prompt


def test_whole_number_measurements_have_no_decimal_suffix():
    prompt = build_prompt(Profile(height_cm=180.0, weight_kg=80.0))
    assert "180cm" in prompt
    assert "80kg" in prompt


def test_prompt_carries_domain_instructions():
    prompt = build_prompt(Profile())
    assert "BMR and TDEE" in prompt
    assert "2g per kg" in prompt
    assert "4 meals per day" in prompt
    assert "Monday (Push)" in prompt and "Sunday (Rest)" in prompt
    assert "5-7 exercises" in prompt
    assert "no code fences" in prompt


def test_output_schema_keys_match_normalizer_mapping():
    assert set(OUTPUT_SCHEMA) == set(PLAN_DOCUMENT_MAP)
    prompt = build_prompt(Profile())
    for key in PLAN_DOCUMENT_MAP:
        assert f'"{key}"' in prompt


def test_values_are_not_clamped():
    prompt = build_prompt(Profile(age=0, activity_level="Couch <script>"))
    assert "- Age: 0" in prompt
    assert "Couch <script>" in prompt
