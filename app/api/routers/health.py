from datetime import datetime, timezone

from fastapi import APIRouter
from pydantic import BaseModel

router = APIRouter(tags=["health"])


class HealthOut(BaseModel):
    status: str
    timestamp: datetime


@router.get("/health", summary="État du service", response_model=HealthOut)
def health():
    return HealthOut(status="OK", timestamp=datetime.now(timezone.utc))
