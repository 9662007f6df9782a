import logging

from application.rest.schemas.output.common_output import ErrorResponse, HealthResponse
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy import text
from sqlalchemy.orm import Session
from utils.dependencies import get_db

logger = logging.getLogger(__name__)
router = APIRouter()

SERVICE_NAME = "diary-service"


@router.get(
    path="/health",
    description="Health check endpoint; verifies the record store answers queries.",
    response_model=HealthResponse,
    status_code=status.HTTP_200_OK,
    responses={
        status.HTTP_503_SERVICE_UNAVAILABLE: {
            "model": ErrorResponse,
            "description": "Record store unreachable.",
            "content": {
                "application/json": {"example": {"detail": "Database unavailable"}}
            },
        },
    },
)
async def health_check(db: Session = Depends(get_db)) -> HealthResponse:
    """Health check endpoint for service monitoring.

    Returns:
        HealthResponse: Service status information containing status and service name.

    Raises:
        HTTPException: 503 if the database cannot run a trivial query.
    """
    try:
        db.execute(text("SELECT 1"))
    except Exception as e:
        logger.error(f"Health check failed: {e}")
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Database unavailable",
        ) from e

    return HealthResponse(status="healthy", service=SERVICE_NAME)
