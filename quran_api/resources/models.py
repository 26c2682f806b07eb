"""
Data models for the resource pipeline.

A ResourceSpec row describes one tool; ResourceService turns a row plus
validated arguments into a ResourceResponse.
"""
import string
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, Optional, Tuple, Type

from quran_api.cache.keys import KeyProjection
from quran_api.schemas import ToolParams


class ResourceKind(Enum):
    """Categories of upstream data."""
    CHAPTERS = "chapters"
    VERSES = "verses"
    AUDIO = "audio"
    TRANSLATIONS = "translations"
    TAFSIRS = "tafsirs"
    LANGUAGES = "languages"
    JUZS = "juzs"
    SEARCH = "search"
    QURAN_TEXT = "quran_text"


class SourceKind(Enum):
    """Where a response payload came from."""
    API = "api"
    CACHE = "cache"
    FALLBACK = "fallback"


@dataclass(frozen=True)
class ResourceSpec:
    """
    Configuration for one tool.

    Attributes:
        tool: Tool name exposed to callers
        kind: Resource kind tag
        description: Human readable summary for tool listings
        path: Upstream path template, formatted with validated arguments
        params_model: Pydantic model validating the arguments
        cache_key: Key projection; None means the tool bypasses the cache
        fallback: Fallback dataset name; None means failures propagate
        reducer: Optional transform applied to the upstream payload
        cache_capacity: Entries held by this tool's cache
        aliases: Alternative names that dispatch to this tool
    """
    tool: str
    kind: ResourceKind
    description: str
    path: str
    params_model: Type[ToolParams]
    cache_key: Optional[KeyProjection] = None
    fallback: Optional[str] = None
    reducer: Optional[Callable[[Any], Any]] = None
    cache_capacity: int = 50
    aliases: Tuple[str, ...] = ()

    @property
    def cacheable(self) -> bool:
        return self.cache_key is not None

    @property
    def path_fields(self) -> Tuple[str, ...]:
        """Argument names consumed by the path template."""
        return tuple(
            name for _, name, _, _ in string.Formatter().parse(self.path) if name
        )

    def build_request(self, params: ToolParams) -> Tuple[str, Dict[str, Any]]:
        """
        Split validated arguments into the upstream path and query.

        Path placeholders are filled from the arguments; every other
        non-None argument becomes a query parameter.
        """
        values = params.model_dump(exclude_none=True)
        path_fields = self.path_fields
        path = self.path.format(**{name: values[name] for name in path_fields})
        query = {k: v for k, v in values.items() if k not in path_fields}
        return path, query


@dataclass(frozen=True)
class ResourceResponse:
    """
    Envelope returned to the caller-facing layer.

    ``source`` tells fresh upstream data apart from cached snapshots and
    static fallback substitutes.
    """
    success: bool
    source: SourceKind
    payload: Any
    message: str
    tool: str = ""

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON response."""
        return {
            "success": self.success,
            "message": self.message,
            "data": self.payload,
        }
