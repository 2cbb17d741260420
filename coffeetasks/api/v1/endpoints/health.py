"""Health check endpoints. Liveness needs nothing; readiness reports the store."""

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from coffeetasks.schemas.health import HealthResponse, ReadinessResponse

router = APIRouter()


@router.get("", response_model=HealthResponse)
def health_check() -> HealthResponse:
    """Return simple ok status for liveness."""
    return HealthResponse()


@router.get(
    "/ready",
    response_model=ReadinessResponse,
    responses={503: {"description": "Firestore client not configured", "model": ReadinessResponse}},
)
async def readiness_check(request: Request) -> ReadinessResponse | JSONResponse:
    """Return 200 when a Firestore client is available; 503 otherwise."""
    configured = getattr(request.app.state, "firestore", None) is not None
    if configured:
        return ReadinessResponse(firestore=True)
    return JSONResponse(
        status_code=503,
        content=ReadinessResponse(status="not_ready", firestore=False).model_dump(),
    )
