"""Immutable catalogs shared by the intake form and the server."""

from dataclasses import dataclass

PAINT_CATEGORY = "Peinture"

PAINT_OPTIONS: tuple[str, ...] = (
    "intérieure",
    "rénovation",
    "décorative",
    "bois et menuiserie",
    "commerciale",
    "extérieure",
)

MAX_PHOTOS = 4
PHOTO_SEPARATOR = " | "


@dataclass(frozen=True)
class Step:
    """One screen of the intake form."""

    key: str
    title: str
    required: bool = True


STEPS: tuple[Step, ...] = (
    Step("categories", "Catégorie"),
    Step("name", "Nom"),
    Step("phone", "Téléphone"),
    Step("localisation", "Localisation"),
    Step("budget", "Budget estimé"),
    Step("photos", "Photos", required=False),
    Step("description", "Description", required=False),
    Step("review", "Résumé"),
)

STEP_KEYS: tuple[str, ...] = tuple(step.key for step in STEPS)


@dataclass(frozen=True)
class CategoryRules:
    """Text rules used to recognise and shorten paint subcategory labels."""

    paint_label: str = PAINT_CATEGORY
    connector_patterns: tuple[str, ...] = (r"de\s+", r"d[’']\s*")
    known_subcategories: tuple[str, ...] = PAINT_OPTIONS


FRENCH_CATEGORY_RULES = CategoryRules()
