"""Category canonicalization for stored leads."""

import re
from typing import Any

from app.domain.catalog import FRENCH_CATEGORY_RULES, CategoryRules


def _as_list(category: Any) -> list[str]:
    """Accept a single value or a list of values."""
    if isinstance(category, (list, tuple)):
        values = category
    elif category:
        values = [category]
    else:
        values = []
    return [str(value if value is not None else "").strip() for value in values]


def _unique(values: list[str]) -> list[str]:
    """Deduplicate keeping first-seen order."""
    return list(dict.fromkeys(values))


def _expand_joined(value: str, rules: CategoryRules) -> list[str]:
    """
    Split an already joined value ("Peinture : a, b") back into paint entries.

    Lets the formatter accept its own output and the single string sent by the form.
    """
    match = re.match(rf"^{re.escape(rules.paint_label)}\s*:\s*(.*)$", value, re.IGNORECASE)
    if match is None:
        return [value]
    subs = [part.strip() for part in match.group(1).split(",") if part.strip()]
    return [f"{rules.paint_label} {sub}" for sub in subs] or [rules.paint_label]


def _is_paint(value: str, rules: CategoryRules) -> bool:
    return value == rules.paint_label or value.startswith(f"{rules.paint_label} ")


def _strip_paint_prefix(value: str, rules: CategoryRules) -> str:
    """Turn "Peinture de rénovation" into "rénovation"."""
    sub = re.sub(rf"^{re.escape(rules.paint_label)}\s+", "", value, flags=re.IGNORECASE)
    for pattern in rules.connector_patterns:
        sub = re.sub(rf"^{pattern}", "", sub, flags=re.IGNORECASE)
    return sub.strip()


def format_category(category: Any, rules: CategoryRules = FRENCH_CATEGORY_RULES) -> str:
    """
    Canonicalize raw category input into the stored category string.

    Paint subcategories are grouped under one "Peinture : a, b" entry, other
    categories follow as separate comma-separated entries. Bare subcategory
    labels from the paint catalog (e.g. "intérieure") count as paint entries.

    Args:
        category: A string or a list of strings as posted by the form
        rules: Locale-specific paint label and connector patterns

    Returns:
        Canonical category string, or "" when nothing recognizable remains
    """
    cleaned: list[str] = []
    for value in _as_list(category):
        if not value:
            continue
        if value in rules.known_subcategories:
            value = f"{rules.paint_label} {value}"
        cleaned.extend(_expand_joined(value, rules))

    if not cleaned:
        return ""

    paint_subs = _unique(
        [
            sub
            for sub in (_strip_paint_prefix(c, rules) for c in cleaned if _is_paint(c, rules))
            if sub and sub != rules.paint_label
        ]
    )
    others = _unique([c for c in cleaned if not _is_paint(c, rules)])

    parts: list[str] = []
    if paint_subs:
        parts.append(f"{rules.paint_label} : {', '.join(paint_subs)}")
    elif rules.paint_label in cleaned:
        parts.append(rules.paint_label)
    parts.extend(others)

    return ", ".join(parts)
