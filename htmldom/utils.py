"""Small string helpers shared by the tokenizer, tree and serializer."""

_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)

_TRIM_CHARS = " \t\n\r\f"

_ESCAPES = str.maketrans(
    {
        "&": "&amp;",
        "<": "&lt;",
        ">": "&gt;",
        '"': "&quot;",
        "'": "&#39;",
    }
)


def to_lower(text: str) -> str:
    """Lower-case ASCII letters only, leaving every other character untouched."""
    return text.translate(_ASCII_LOWER)


def trim(text: str) -> str:
    """Strip HTML whitespace (space, tab, newline, carriage return, form feed) from both ends."""
    return text.strip(_TRIM_CHARS)


def escape_html(text: str) -> str:
    """Escape the five characters that are significant in HTML text and attribute values."""
    return text.translate(_ESCAPES)