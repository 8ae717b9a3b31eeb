"""Calendar memo endpoints and the month grid."""

from datetime import datetime

from fastapi import APIRouter, Depends, HTTPException, Path, status

from sinjapan_manager.application.schemas import (
    Memo,
    MemoCreate,
    MemoUpdate,
    MonthGridResponse,
    Mutation,
)
from sinjapan_manager.application.services import MemoService
from sinjapan_manager.domain.exceptions import EntityNotFoundError
from sinjapan_manager.infrastructure.dependencies import get_memo_service

router = APIRouter(prefix="/memos", tags=["Memos"])


def memo_range(start: datetime | None = None, end: datetime | None = None) -> dict:
    return {
        "start": start.isoformat() if start else None,
        "end": end.isoformat() if end else None,
    }


@router.get("", response_model=list[Memo])
async def list_memos(
    start: datetime | None = None,
    end: datetime | None = None,
    service: MemoService = Depends(get_memo_service),
) -> list[Memo]:
    """Memos whose date falls between ``start`` and ``end``."""
    return await service.between(start, end)


@router.get("/calendar/{year}/{month}", response_model=MonthGridResponse)
async def month_calendar(
    year: int = Path(..., ge=1970, le=9999),
    month: int = Path(..., ge=1, le=12),
    service: MemoService = Depends(get_memo_service),
) -> MonthGridResponse:
    """Sunday-first month grid with memos attached to their days."""
    return await service.month(year, month)


@router.post("", response_model=Mutation[Memo], status_code=status.HTTP_201_CREATED)
async def create_memo(
    data: MemoCreate,
    refresh: dict = Depends(memo_range),
    service: MemoService = Depends(get_memo_service),
) -> Mutation[Memo]:
    return await service.create(data, refresh)


@router.patch("/{memo_id}", response_model=Mutation[Memo])
async def update_memo(
    memo_id: str,
    data: MemoUpdate,
    refresh: dict = Depends(memo_range),
    service: MemoService = Depends(get_memo_service),
) -> Mutation[Memo]:
    try:
        return await service.update(memo_id, data, refresh)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.delete("/{memo_id}", response_model=Mutation[Memo])
async def delete_memo(
    memo_id: str,
    refresh: dict = Depends(memo_range),
    service: MemoService = Depends(get_memo_service),
) -> Mutation[Memo]:
    try:
        return await service.delete(memo_id, refresh)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
