import re

# Acronym runs, capitalised or lower-case words, and digit runs.
_WORD_RE = re.compile(r'[A-Z]+(?![a-z])|[A-Z]?[a-z]+|[0-9]+')


def split_words(text) -> list[str]:
    """Split free-form text into words.

    Any non-alphanumeric run separates words, as do lower->upper case
    boundaries ("memesGalore"), acronym boundaries ("HTTPServer") and
    letter/digit boundaries ("cache2").
    """
    return _WORD_RE.findall(str(text))


def camel_case(text) -> str:
    """Return the camel-case form of `text` (e.g. "memes galore" -> "memesGalore")."""
    words = split_words(text)
    if not words:
        return ''
    head, *rest = words
    return head.lower() + ''.join(w[:1].upper() + w[1:].lower() for w in rest)


def upper_snake_case(text) -> str:
    """Return the upper snake-case form of `text` (e.g. "memesGalore" -> "MEMES_GALORE")."""
    return '_'.join(w.upper() for w in split_words(text))


def normalize_identifier(identifier: str) -> str:
    """Canonical registry key for a tenant identifier.

    Raises ValueError when the identifier carries no alphanumeric content.
    Not idempotent for single-letter words: "a b c" gives "aBC", which
    normalizes again to "aBc". `TenantRegistry` accepts its stored keys
    as-is for that reason.
    """
    normalized = camel_case(identifier)
    if not normalized:
        raise ValueError(f"Tenant identifier {identifier!r} has no usable characters")
    return normalized


def derive_prefix(identifier: str) -> str:
    """Storage key prefix for a tenant identifier."""
    return upper_snake_case(normalize_identifier(identifier))
