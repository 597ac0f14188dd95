"""
Server status and health routes.

Route prefix: {api_prefix}
"""

from __future__ import annotations

import platform
import time
from datetime import datetime, timezone
from typing import Any, Dict

from fastapi import APIRouter

from config.settings import config

router = APIRouter(tags=["status"])

_STARTED_AT = time.monotonic()


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


@router.get("")
async def server_status() -> Dict[str, Any]:
    """Report what is running and for how long."""
    return {
        "status": "running",
        "timestamp": _now_iso(),
        "uptime": round(time.monotonic() - _STARTED_AT, 3),
        "environment": config.environment,
        "version": config.app_version,
        "platform": platform.system().lower(),
        "pythonVersion": platform.python_version(),
        "throttle": config.throttle_config(),
    }


@router.get("/health")
async def health() -> Dict[str, str]:
    return {"status": "healthy", "timestamp": _now_iso()}
