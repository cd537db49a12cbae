from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from shared.core.database import get_db
from ..crud import stats_crud as crud
from ..schemas.stats_schemas import StatsOut

router = APIRouter(prefix="/api/stats", tags=["stats"])


@router.get("", response_model=StatsOut)
def get_stats(db: Session = Depends(get_db)):
    return crud.get_stats(db)
