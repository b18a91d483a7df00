"""
ReliefHub Backend — Server Status Route
=========================================

What:  GET / returns a fixed message and the current server time.
Who:   Hit by developers and uptime probes to see the process is serving.

It does not touch the document store; a 200 here means the HTTP listener
is up, not that MongoDB is reachable.
"""

from datetime import datetime, timezone

from fastapi import APIRouter

from reliefhub.schemas.common import ServerStatus

router = APIRouter(tags=["Status"])


@router.get("/", response_model=ServerStatus, summary="Server status")
async def server_status() -> ServerStatus:
    return ServerStatus(timestamp=datetime.now(timezone.utc))
