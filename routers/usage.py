from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from core.database import get_db
from schemas.usage import ApiUsageOut
from services.usage_service import UsageService

router = APIRouter(prefix="/usage", tags=["usage"])


@router.get("", response_model=list[ApiUsageOut])
async def list_usage(
    days: int | None = Query(None, ge=1, le=365, description="Only the most recent N days"),
    db: Session = Depends(get_db),
):
    return [ApiUsageOut.model_validate(row) for row in UsageService(db).list(days=days)]
