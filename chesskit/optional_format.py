"""Format-spec helpers: spec selection and formatting of optional values."""

from __future__ import annotations

from typing import Any, Optional, Sequence


def select_spec(spec: str, tokens: Sequence[str]) -> str:
    """Return the token ``spec`` names; an empty spec selects the first token."""
    if not spec:
        return tokens[0]
    if spec in tokens:
        return spec
    raise ValueError(f"invalid format spec {spec!r}; expected one of {list(tokens)}")


def _split(spec: str) -> tuple[str, str, str, str]:
    """Split ``prefix[inner]suffix?fallback`` into its four parts."""
    bracket = spec.find("[")
    question = spec.find("?")

    if bracket < 0 or (0 <= question < bracket):
        head = spec if question < 0 else spec[:question]
        if head:
            raise ValueError(f"invalid optional format spec {spec!r}")
        fallback = "" if question < 0 else spec[question + 1 :]
        return "", "", "", fallback

    prefix = spec[:bracket]
    if "]" in prefix:
        raise ValueError(f"unmatched ']' in optional format spec {spec!r}")
    close = spec.find("]", bracket + 1)
    if close < 0:
        raise ValueError(f"unclosed '[' in optional format spec {spec!r}")
    inner = spec[bracket + 1 : close]
    rest = spec[close + 1 :]
    suffix, _, fallback = rest.partition("?")
    return prefix, inner, suffix, fallback


def format_optional(value: Optional[Any], spec: str = "") -> str:
    """Format a value that may be None.

    The spec reads ``prefix[inner]suffix?fallback``: a present value is
    written as prefix, the value formatted with ``inner``, then suffix; a
    missing value is written as the fallback text alone.
    """
    prefix, inner, suffix, fallback = _split(spec)
    if value is None:
        return fallback
    return f"{prefix}{format(value, inner)}{suffix}"