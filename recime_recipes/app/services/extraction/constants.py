"""Shared constants for recipe extraction."""

import re

DEFAULT_TITLE = "Scanned Recipe"
DEFAULT_DESCRIPTION = "Recipe extracted from text"
DEFAULT_SERVINGS = 4

FRACTION_CHARS = "½⅓⅔¼¾⅕⅖⅗⅘⅙⅚⅛⅜⅝⅞"

JSON_LD_SELECTOR = 'script[type="application/ld+json"]'

# Selector cascades are queried as one combined selector; results come back in document order.
TITLE_SELECTORS = ("h1", ".recipe-title", ".entry-title", "[itemprop=name]")
DESCRIPTION_SELECTORS = (".recipe-description", ".recipe-summary", "[itemprop=description]")
INGREDIENT_SELECTORS = (
    ".recipe-ingredient",
    ".ingredient",
    "[itemprop=recipeIngredient]",
    ".recipe-ingredients li",
)
INSTRUCTION_SELECTORS = (
    ".recipe-instruction",
    ".instruction",
    "[itemprop=recipeInstructions]",
    ".recipe-instructions li",
    ".recipe-method li",
)
COOK_TIME_SELECTORS = ("[itemprop=cookTime]", ".cook-time", ".cooking-time")
PREP_TIME_SELECTORS = ("[itemprop=prepTime]", ".prep-time", ".preparation-time")

DURATION_RE = re.compile(r"(?<!\d)(\d+)\s*(mins?|minutes?|hours?|hrs?)(?![a-z])", re.I)
DURATION_UNIT_RE = re.compile(r"(?<![a-z])(?:mins?|minutes?|hours?|hrs?)\b", re.I)
ISO8601_DURATION_RE = re.compile(
    r"P(?:(\d+)D)?(?:T(?:(\d+)H)?(?:(\d+)M)?(?:(\d+(?:\.\d+)?)S)?)?", re.I
)

INGREDIENT_PATTERNS = (
    re.compile(
        r"\d+\s*(?:cups?|tsp|tbsp|tablespoons?|teaspoons?|oz|ounces?|lbs?|pounds?|kg|g|ml|l)\b",
        re.I,
    ),
    re.compile(rf"\d+/\d+|[{FRACTION_CHARS}]"),
    re.compile(r"\d+\.\d+"),
    re.compile(r"\b(?:salt|pepper|sugar|flour|oil|butter|eggs?|onion|garlic)", re.I),
)

INSTRUCTION_PATTERNS = (
    re.compile(r"^\d+[.)\s]"),
    re.compile(r"(?:heat|cook|bake|mix|add|stir|combine|pour|place|chop|dice|slice)", re.I),
    re.compile(r"^(?:first|then|next|finally|meanwhile)\b", re.I),
)
