import pytest

from recime_recipes.app.services.extraction.extractors.text_classifier import (
    TEXT_RULES,
    classify_line,
    classify_recipe_text,
    looks_like_ingredient,
    looks_like_instruction,
)
from recime_recipes.app.services.extraction.models import RecipeDraft


def _titled() -> RecipeDraft:
    return RecipeDraft(title="Already Titled")


def test_rule_order_is_fixed():
    assert [rule.name for rule in TEXT_RULES] == [
        "title",
        "cook_time",
        "prep_time",
        "servings",
        "ingredient",
        "instruction",
    ]


def test_classify_recipe_text_example():
    text = "Spicy Noodles\nServes 2\n2 cups noodles\n1 tbsp soy sauce\n1. Boil water\n2. Add noodles"
    draft = classify_recipe_text(text)
    assert draft.title == "Spicy Noodles"
    assert draft.servings == 2
    assert draft.ingredients == ["2 cups noodles", "1 tbsp soy sauce"]
    assert draft.instructions == ["1. Boil water", "2. Add noodles"]


def test_classify_full_recipe():
    text = """
    Lemon Herb Chicken

    Prep time: 10 mins
    Cook time: 1 hour
    Serves 6
    2 lb chicken breasts
    1/2 cup lemon juice
    3 cloves garlic
    Pinch of salt
    First, preheat the oven.
    Place chicken in a dish.
    Bake until golden.
    Enjoy!
    """
    draft = classify_recipe_text(text)
    assert draft.strategy == "text_heuristic"
    assert draft.title == "Lemon Herb Chicken"
    assert draft.prep_time_minutes == 10
    assert draft.cook_time_minutes == 60
    assert draft.servings == 6
    assert draft.ingredients == [
        "2 lb chicken breasts",
        "1/2 cup lemon juice",
        "3 cloves garlic",
        "Pinch of salt",
    ]
    assert draft.instructions == [
        "First, preheat the oven.",
        "Place chicken in a dish.",
        "Bake until golden.",
    ]


def test_ingredient_wins_over_instruction():
    # Intentional: the ingredient rule is checked before the instruction rule.
    line = "Add 2 cups flour and mix"
    assert looks_like_ingredient(line)
    assert looks_like_instruction(line)
    draft = _titled()
    assert classify_line(line, draft) == "ingredient"
    assert draft.ingredients == [line]
    assert draft.instructions == []


def test_ingredient_looking_line_never_becomes_title():
    draft = classify_recipe_text("Garlic Butter Shrimp\nEasy weeknight dinner")
    assert draft.ingredients == ["Garlic Butter Shrimp"]
    assert draft.title == "Easy weeknight dinner"


def test_short_first_line_is_not_title():
    draft = classify_recipe_text("Soup\nTomato Bisque")
    assert draft.title == "Tomato Bisque"


def test_title_is_first_assignment_only():
    draft = classify_recipe_text("Tomato Bisque\nAnother Long Line")
    assert draft.title == "Tomato Bisque"


def test_timings_and_servings_keep_first_value():
    draft = _titled()
    assert classify_line("Cook time: 25 minutes", draft) == "cook_time"
    assert classify_line("Cook time: 40 minutes", draft) == "cook_time"
    assert classify_line("Prep: 1 hour 30 minutes", draft) == "prep_time"
    assert classify_line("Serves 4", draft) == "servings"
    assert classify_line("Serves 10", draft) == "servings"
    assert draft.cook_time_minutes == 25
    assert draft.prep_time_minutes == 60
    assert draft.servings == 4
    assert draft.instructions == []


def test_metadata_lines_without_values_are_consumed():
    draft = _titled()
    assert classify_line("Cook time: about an hour", draft) == "cook_time"
    assert classify_line("Serving size: one bowl", draft) == "servings"
    assert draft.cook_time_minutes is None
    assert draft.servings is None


def test_attached_duration_units_are_recognized():
    draft = _titled()
    assert classify_line("Cook 12min", draft) == "cook_time"
    assert classify_line("Prep 2hrs", draft) == "prep_time"
    assert draft.cook_time_minutes == 12
    assert draft.prep_time_minutes == 120


def test_cook_without_duration_is_an_instruction():
    draft = _titled()
    assert classify_line("Cook the pasta until tender", draft) == "instruction"
    assert classify_line("Cook the minced shallots", draft) == "instruction"
    assert draft.cook_time_minutes is None


def test_number_before_longer_word_is_not_a_duration():
    draft = _titled()
    assert classify_line("Cook 5 minced shallots for 10 minutes", draft) == "cook_time"
    assert draft.cook_time_minutes == 10


@pytest.mark.parametrize(
    "line",
    ["1 tbsp soy sauce", "500g beef", "½ lemon", "0.5 lime", "Pinch of salt", "3 large eggs"],
)
def test_ingredient_patterns(line):
    assert classify_line(line, _titled()) == "ingredient"


@pytest.mark.parametrize(
    "line",
    ["1. Boil water", "2) Drain", "Then simmer gently", "Meanwhile, whisk", "Stir well", "Preheat the grill"],
)
def test_instruction_patterns(line):
    assert classify_line(line, _titled()) == "instruction"


@pytest.mark.parametrize("line", ["Enjoy!", "Notes", "Recipe by Grandma"])
def test_unrecognized_lines_are_discarded(line):
    draft = _titled()
    assert classify_line(line, draft) is None
    assert draft.ingredients == []
    assert draft.instructions == []


def test_blank_lines_and_crlf_are_skipped():
    draft = classify_recipe_text("Tomato Bisque\r\n\r\n   \r\n2 cups stock\r\n")
    assert draft.title == "Tomato Bisque"
    assert draft.ingredients == ["2 cups stock"]
