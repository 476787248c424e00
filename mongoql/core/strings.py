"""
Naming helpers for generated collections and GraphQL operations.
"""

import re

_GRAPHQL_NAME_RE = re.compile(r"^[_A-Za-z][_0-9A-Za-z]*$")

_IRREGULAR_PLURALS = {
    "person": "people",
    "child": "children",
    "man": "men",
    "woman": "women",
    "foot": "feet",
    "tooth": "teeth",
    "goose": "geese",
    "mouse": "mice",
    "datum": "data",
    "medium": "media",
    "criterion": "criteria",
    "index": "indices",
    "matrix": "matrices",
    "vertex": "vertices",
    "leaf": "leaves",
    "half": "halves",
    "wolf": "wolves",
    "shelf": "shelves",
    "knife": "knives",
    "wife": "wives",
    "life": "lives",
    "hero": "heroes",
    "potato": "potatoes",
    "tomato": "tomatoes",
    "echo": "echoes",
    "veto": "vetoes",
    "torpedo": "torpedoes",
}

_UNCOUNTABLE = {"news", "series", "species", "equipment", "information"}

_VOWELS = set("aeiou")


def _match_case(source: str, plural: str) -> str:
    if source[:1].isupper():
        return plural[:1].upper() + plural[1:]
    return plural


def pluralize(word: str) -> str:
    """
    Convert a singular English word to its plural form.

    Only the trailing word of a camelCase name is inflected, so
    ``blogPost`` becomes ``blogPosts`` and ``userPerson`` becomes
    ``userPeople``.

    Examples:
        >>> pluralize("tweet")
        'tweets'
        >>> pluralize("policy")
        'policies'
        >>> pluralize("status")
        'statuses'
    """
    if not word:
        return word

    match = re.search(r"[A-Z]?[a-z0-9]*$", word)
    head, tail = word[: match.start()], word[match.start():]
    if not tail:
        return f"{word}s"

    lower = tail.lower()
    if lower in _UNCOUNTABLE:
        return word
    if lower in _IRREGULAR_PLURALS:
        return head + _match_case(tail, _IRREGULAR_PLURALS[lower])

    if lower.endswith("y") and len(lower) > 1 and lower[-2] not in _VOWELS:
        return f"{head}{tail[:-1]}ies"
    if lower.endswith("z") and len(lower) > 1 and lower[-2] in _VOWELS:
        return f"{head}{tail}zes"
    if lower.endswith(("s", "x", "z", "ch", "sh")):
        return f"{head}{tail}es"
    return f"{head}{tail}s"


def capitalize(value: str) -> str:
    """Upper-case the first character and leave the rest untouched."""
    return value[:1].upper() + value[1:]


def is_graphql_name(value: str) -> bool:
    return bool(value) and bool(_GRAPHQL_NAME_RE.match(value))
