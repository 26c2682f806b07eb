"""
Cache key derivation.

Keys are built from the resource kind, the tool name and only those
arguments that change the shape of the upstream response, so requests
with the same effective parameters share a slot.
"""
from typing import Any, Callable, Mapping

DEFAULT_LANGUAGE = "en"

KeyProjection = Callable[[str, str, Mapping[str, Any]], str]


def normalize_language(value: Any) -> str:
    """Trim and lowercase a language code, defaulting to English."""
    if value is None:
        return DEFAULT_LANGUAGE
    text = str(value).strip().lower()
    return text or DEFAULT_LANGUAGE


def language_key(kind: str, tool: str, params: Mapping[str, Any]) -> str:
    """Key for whole-resource lists that vary only by language."""
    return f"{kind}:{tool}:{normalize_language(params.get('language'))}"


def static_key(kind: str, tool: str, params: Mapping[str, Any]) -> str:
    """Key for parameterless resources."""
    return f"{kind}:{tool}"
