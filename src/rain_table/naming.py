"""Header label naming.

Column keys such as ``created_at`` or ``userName`` are turned into
human-readable labels (``Created At``, ``User Name``) the way Rails'
``titleize`` does:

- CamelCase is split into underscore-separated words
- A trailing ``_id`` is dropped (``author_id`` -> ``Author``)
- Underscores and hyphens become spaces
- Each word is capitalized
"""

import re
from typing import Any

_ACRONYM_BOUNDARY = re.compile(r"([A-Z\d]+)([A-Z][a-z])")
_CAMEL_BOUNDARY = re.compile(r"([a-z\d])([A-Z])")
_WORD_START = re.compile(r"(?<![\w'’`])[a-z]")


def underscore(word: str) -> str:
    """Convert ``CamelCase`` or ``kebab-case`` to ``snake_case``."""
    word = _ACRONYM_BOUNDARY.sub(r"\1_\2", word)
    word = _CAMEL_BOUNDARY.sub(r"\1_\2", word)
    return word.replace("-", "_").lower()


def humanize(word: str) -> str:
    """
    Turn a snake_case key into a sentence-cased phrase.

    Leading underscores and a trailing ``_id`` are removed and the first
    letter is capitalized.
    """
    result = word.lstrip("_")
    if result.endswith("_id"):
        result = result[: -len("_id")]
    result = result.replace("_", " ").strip()
    return result[:1].upper() + result[1:]


def titleize(key: Any) -> str:
    """
    Build a header label from a column key.

    Args:
        key: Column key (non-string keys are converted with ``str``)

    Returns:
        Title-cased label

    Example:
        >>> titleize("created_at")
        'Created At'
        >>> titleize("id")
        'Id'
    """
    phrase = humanize(underscore(str(key)))
    return _WORD_START.sub(lambda m: m.group(0).upper(), phrase)
