"""
Quran.com resource gateway - FastAPI application
Exposes every Quran.com API tool with caching, retries and fallback data
"""
import logging
from contextlib import asynccontextmanager
from typing import Any, Dict, Optional

from fastapi import Body, FastAPI, HTTPException
from fastapi.responses import JSONResponse

from config.settings import settings
from quran_api import __version__
from quran_api.errors import TransportError, ValidationError
from quran_api.fallback import FALLBACK_VERSION
from quran_api.resources import ResourceService, build_services, list_tools, resolve_tool
from quran_api.utils.trace import verbose_log

logging.basicConfig(level=settings.log_level)
logger = logging.getLogger("main")

APP_NAME = "Quran.com API Gateway"

INVALID_PARAMS_MESSAGE = "Invalid request parameters. Please check your input and try again."
GENERIC_ERROR_MESSAGE = "An error occurred processing your request. Please try again later."
UPSTREAM_ERROR_MESSAGE = "The Quran.com API is currently unavailable. Please try again later."

# Tool name -> service, built on first use
_services: Optional[Dict[str, ResourceService]] = None


def get_services() -> Dict[str, ResourceService]:
    """Get or create the tool services."""
    global _services
    if _services is None:
        _services = build_services()
    return _services


def set_services(services: Optional[Dict[str, ResourceService]]) -> None:
    """Replace the tool services; None rebuilds them on next use."""
    global _services
    _services = services


def close_services() -> None:
    """Close the HTTP sessions behind the tool services and drop them."""
    global _services
    if _services is None:
        return
    clients = {id(service.client): service.client for service in _services.values()}
    for client in clients.values():
        client.close()
    logger.info(f"Closed {len(clients)} API client(s)")
    _services = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    close_services()


app = FastAPI(
    title=APP_NAME,
    description="Cached, retried access to the Quran.com v4 API",
    version=__version__,
    lifespan=lifespan,
)


def _error_response(status_code: int, message: str, **extra: Any) -> JSONResponse:
    content = {"success": False, "message": message}
    content.update(extra)
    return JSONResponse(status_code=status_code, content=content)


@app.get("/health")
def health_check():
    """Health check endpoint."""
    return {"status": "ok", "upstream": settings.quran_api_base_url}


@app.get("/version")
def version_info():
    """Version information endpoint."""
    return {
        "name": APP_NAME,
        "version": __version__,
        "full": f"{APP_NAME} {__version__}",
        "fallback_data": FALLBACK_VERSION,
    }


@app.get("/tools")
def tools():
    """List available tools with their argument schemas."""
    return {"tools": list_tools()}


@app.post("/tools/{name}")
def call_tool(name: str, arguments: Optional[Dict[str, Any]] = Body(default=None)):
    """
    Call a tool.

    The body is the tool's argument object. Returns the
    {success, message, data} envelope; ``message`` says whether the
    data came from the API, the cache or the fallback dataset.
    """
    service = get_services().get(resolve_tool(name))
    if service is None:
        raise HTTPException(status_code=404, detail=f"Unknown tool: {name}")

    verbose_log("request", {"tool": name, "arguments": arguments})

    try:
        result = service.fetch(arguments or {})
    except ValidationError as e:
        logger.info(f"{name}: {e.message}")
        return _error_response(400, INVALID_PARAMS_MESSAGE, errors=e.to_list())
    except TransportError as e:
        logger.error(f"{name}: upstream failure: {e.message}")
        verbose_log("error", {"tool": name, "error": e.message, "status": e.status})
        return _error_response(502, UPSTREAM_ERROR_MESSAGE)
    except Exception as e:
        logger.exception(f"{name}: unexpected error")
        verbose_log("error", {"tool": name, "error": repr(e)})
        return _error_response(500, GENERIC_ERROR_MESSAGE)

    verbose_log("response", {"tool": name, "source": result.source.value})
    return result.to_dict()


@app.get("/cache/stats")
def cache_stats():
    """Get per-tool cache statistics."""
    return {
        name: service.get_cache_stats()
        for name, service in get_services().items()
        if service.cache is not None
    }


@app.delete("/cache")
def clear_cache():
    """Drop every cached entry."""
    cleared = sum(
        service.cache.clear()
        for service in get_services().values()
        if service.cache is not None
    )
    return {"cleared": cleared}
