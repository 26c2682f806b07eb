"""Verbose request/response/error tracing.

Emits one JSON record per event to the ``quran_api.trace`` logger.
Controlled by the VERBOSE_MODE setting; has no effect on control flow.
"""

import json
import logging
from dataclasses import dataclass, asdict
from datetime import datetime
from typing import Any, Dict, Optional

from config.settings import settings

TRACE_KINDS = ("request", "response", "error")

_trace_logger = logging.getLogger("quran_api.trace")

# None defers to settings.verbose_mode
_enabled_override: Optional[bool] = None


@dataclass
class TraceRecord:
    """A single diagnostic trace entry."""
    timestamp: str
    kind: str
    data: Dict[str, Any]


def set_verbose(enabled: Optional[bool]) -> None:
    """Force tracing on or off; None restores the configured value."""
    global _enabled_override
    _enabled_override = enabled


def is_verbose() -> bool:
    if _enabled_override is not None:
        return _enabled_override
    return settings.verbose_mode


def verbose_log(kind: str, data: Dict[str, Any]) -> None:
    """
    Record a trace event when verbose mode is on.

    Args:
        kind: One of "request", "response", "error"
        data: JSON-serialisable details; non-serialisable values are
              rendered with str()
    """
    if not is_verbose():
        return
    if kind not in TRACE_KINDS:
        raise ValueError(f"Unknown trace kind: {kind}")

    entry = TraceRecord(
        timestamp=datetime.utcnow().isoformat() + "Z",
        kind=kind,
        data=data,
    )
    _trace_logger.info(
        f"[VERBOSE] [{kind.upper()}] "
        f"{json.dumps(asdict(entry), default=str, ensure_ascii=False)}"
    )
