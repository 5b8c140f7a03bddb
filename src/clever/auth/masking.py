"""Masking helpers for rendering credentials in logs and error messages."""

# Number of trailing characters of a secret left readable
VISIBLE_CHARS = 4

# Header names whose values carry credentials (compared case-insensitively)
SENSITIVE_HEADERS: frozenset[str] = frozenset(["authorization"])


def mask_sensitive(value: str | None, visible: int = VISIBLE_CHARS, mask_char: str = "*") -> str:
    """Mask all but the trailing characters of a sensitive string.

    The masked string keeps the original length. Values shorter than
    ``visible`` are returned as-is.

    Args:
        value: The secret to mask.
        visible: How many trailing characters to reveal.
        mask_char: Character used for the masked prefix.

    Returns:
        Masked string, or "None" when there is no value.

    Example:
        ```python
        mask_sensitive("Bearer CLEVER_TOKEN")  # "***************OKEN"
        mask_sensitive("abc")  # "abc"
        ```
    """
    if value is None:
        return "None"
    if len(value) < visible:
        return value
    return mask_char * (len(value) - visible) + value[-visible:]


def is_sensitive_header(name: str) -> bool:
    return name.lower() in SENSITIVE_HEADERS
