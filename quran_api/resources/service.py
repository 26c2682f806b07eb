"""
Generic resource pipeline.

validate -> cache lookup -> retrying fetch -> cache store | fallback
"""
import logging
from typing import Any, Mapping, Optional

from quran_api.api_client import QuranApiClient
from quran_api.cache import TTLCache
from quran_api.errors import TransportError, ValidationError
from quran_api.fallback import get_fallback
from quran_api.schemas import ToolParams, validate_arguments
from quran_api.utils.trace import verbose_log

from .models import ResourceResponse, ResourceSpec, SourceKind

logger = logging.getLogger("resources.service")


class ResourceService:
    """
    Serves one tool described by a ResourceSpec.

    - Cacheable tools read and write the injected TTLCache.
    - Tools with a fallback dataset never surface upstream failures;
      they answer with the static dataset and ``source=fallback``.
    - All other tools propagate TransportError and unexpected errors.
    - ValidationError always propagates, before any cache or network access.
    """

    def __init__(
        self,
        spec: ResourceSpec,
        client: QuranApiClient,
        cache: Optional[TTLCache] = None,
    ):
        if spec.cacheable and cache is None:
            raise ValueError(f"Tool {spec.tool} is cacheable but has no cache")
        self.spec = spec
        self.client = client
        self.cache = cache if spec.cacheable else None

    @property
    def tool(self) -> str:
        return self.spec.tool

    def validate(self, arguments: Optional[Mapping[str, Any]]) -> ToolParams:
        try:
            return validate_arguments(self.spec.params_model, arguments)
        except ValidationError as e:
            verbose_log("error", {"method": self.tool, "error": e.message})
            raise

    def cache_key_for(self, params: ToolParams) -> Optional[str]:
        if self.spec.cache_key is None:
            return None
        return self.spec.cache_key(
            self.spec.kind.value, self.tool, params.model_dump()
        )

    def fetch(self, arguments: Optional[Mapping[str, Any]] = None) -> ResourceResponse:
        """
        Run the pipeline for one call.

        Args:
            arguments: Raw tool arguments

        Returns:
            ResourceResponse tagged with api, cache or fallback

        Raises:
            ValidationError: Arguments failed the schema
            TransportError: Upstream failed and the tool has no fallback
        """
        params = self.validate(arguments)

        cache_key = self.cache_key_for(params)
        if cache_key is not None:
            cached = self.cache.get(cache_key)
            if cached is not None:
                logger.debug(f"CACHE HIT: {cache_key}")
                verbose_log("response", {
                    "method": self.tool,
                    "source": SourceKind.CACHE.value,
                    "cacheSize": self.cache.size(),
                })
                return self._respond(SourceKind.CACHE, cached)
            logger.info(f"CACHE MISS: {cache_key}")

        if self.spec.fallback is None:
            payload = self._fetch_upstream(params)
        else:
            try:
                payload = self._fetch_upstream(params)
            except TransportError as e:
                return self._degrade(e, "API unavailable")
            except Exception as e:
                logger.exception(f"Unexpected error in {self.tool}")
                return self._degrade(e, "error occurred")

        if cache_key is not None:
            self.cache.set(cache_key, payload)
        return self._respond(SourceKind.API, payload)

    def _fetch_upstream(self, params: ToolParams) -> Any:
        path, query = self.spec.build_request(params)
        try:
            data = self.client.fetch(path, query)
            payload = self.spec.reducer(data) if self.spec.reducer else data
        except Exception as e:
            verbose_log("error", {"method": self.tool, "error": str(e)})
            raise

        verbose_log("response", {"method": self.tool, "source": SourceKind.API.value})
        return payload

    def _degrade(self, error: Exception, reason: str) -> ResourceResponse:
        logger.warning(f"{self.tool}: serving fallback data ({reason}): {error}")
        verbose_log("response", {
            "method": self.tool,
            "source": SourceKind.FALLBACK.value,
            "reason": reason,
        })
        return self._respond(
            SourceKind.FALLBACK, get_fallback(self.spec.fallback), reason=reason
        )

    def _respond(
        self, source: SourceKind, payload: Any, reason: Optional[str] = None
    ) -> ResourceResponse:
        if source is SourceKind.CACHE:
            message = f"{self.tool} executed successfully (from cache)"
        elif source is SourceKind.FALLBACK:
            message = f"{self.tool} executed with fallback data ({reason})"
        else:
            message = f"{self.tool} executed successfully"

        return ResourceResponse(
            success=True,
            source=source,
            payload=payload,
            message=message,
            tool=self.tool,
        )

    def get_cache_stats(self) -> Optional[dict]:
        return self.cache.get_stats() if self.cache is not None else None
