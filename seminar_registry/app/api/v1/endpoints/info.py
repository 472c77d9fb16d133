"""
Information endpoint for API v1.

Returns the service name and version together with the number of
seminars currently held in memory.
"""

from typing import Any, Dict

from fastapi import APIRouter, Depends, Request

from seminar_registry.app.core.dependencies import get_gateway
from seminar_registry.app.services.gateway import SeminarGateway

router = APIRouter()


@router.get("/", response_model=Dict[str, Any])
async def get_info(request: Request, gateway: SeminarGateway = Depends(get_gateway)) -> Dict[str, Any]:
    settings = request.app.state.settings
    seminars = await gateway.list_seminars()
    return {
        "name": settings.project_name,
        "version": settings.api_version,
        "seminars": len(seminars),
    }
