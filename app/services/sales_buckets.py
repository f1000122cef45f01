# app/services/sales_buckets.py
"""
Keyword classification of line-item names into dashboard sales buckets.

Rules are checked in order and the first match wins, so overlapping
keywords resolve by position: "Sizzling Pork Sisig" contains "pork"
(Rice) before "sizzling" is ever looked at, and is counted as Rice.
"""
from typing import Callable

Rule = tuple[str, Callable[[str], bool]]


def _contains_any(*keywords: str) -> Callable[[str], bool]:
    def match(name: str) -> bool:
        return any(k in name for k in keywords)

    return match


def _is_drink(name: str) -> bool:
    if "lemonade" in name or "soda" in name:
        return True
    return "red tea" in name and "milk" not in name


BUCKET_RULES: tuple[Rule, ...] = (
    (
        "Rice",
        _contains_any(
            "bulgogi", "lechon", "chicken", "adobo",
            "shanghai", "fish", "dory", "pork",
        ),
    ),
    ("Sizzling", _contains_any("sizzling", "sisig", "liempo", "porkchop")),
    ("Party", _contains_any("pancit", "spaghetti", "party")),
    ("Drink", _is_drink),
    ("Cafe", _contains_any("cafe", "americano", "latte", "macchiato", "coffee")),
    ("Milk", _contains_any("milk tea", "matcha green tea")),
    ("Frappe", _contains_any("frappe", "cookies & cream")),
)


def classify(item_name: str) -> str | None:
    """
    Return the bucket an item name sells into, or None if no rule matches.

    Matching is case-insensitive substring search.
    """
    name = item_name.lower()
    for bucket, matches in BUCKET_RULES:
        if matches(name):
            return bucket
    return None
