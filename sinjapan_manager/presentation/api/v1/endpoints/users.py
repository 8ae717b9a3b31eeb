"""User account endpoints (staff, agency and client management pages)."""

from fastapi import APIRouter, Depends, HTTPException, status

from sinjapan_manager.application.schemas import Mutation, User, UserCreate, UserUpdate
from sinjapan_manager.application.services import UserService
from sinjapan_manager.domain.exceptions import EntityNotFoundError
from sinjapan_manager.infrastructure.dependencies import get_current_user, get_user_service

router = APIRouter(prefix="/users", tags=["Users"])


@router.get("", response_model=list[User])
async def list_users(
    role: str | None = None,
    search: str | None = None,
    actor: User = Depends(get_current_user),
    service: UserService = Depends(get_user_service),
) -> list[User]:
    """Accounts filtered by role and name/email search."""
    return await service.list_users(actor, role=role, search=search)


@router.post("", response_model=Mutation[User], status_code=status.HTTP_201_CREATED)
async def create_user(
    data: UserCreate,
    role: str | None = None,
    search: str | None = None,
    actor: User = Depends(get_current_user),
    service: UserService = Depends(get_user_service),
) -> Mutation[User]:
    return await service.create_user(actor, data, {"role": role, "search": search})


@router.patch("/{user_id}", response_model=Mutation[User])
async def update_user(
    user_id: str,
    data: UserUpdate,
    role: str | None = None,
    search: str | None = None,
    actor: User = Depends(get_current_user),
    service: UserService = Depends(get_user_service),
) -> Mutation[User]:
    """Edit an account; a blank password leaves the current one unchanged."""
    try:
        return await service.update_user(actor, user_id, data, {"role": role, "search": search})
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.delete("/{user_id}", response_model=Mutation[User])
async def delete_user(
    user_id: str,
    role: str | None = None,
    search: str | None = None,
    actor: User = Depends(get_current_user),
    service: UserService = Depends(get_user_service),
) -> Mutation[User]:
    try:
        return await service.delete_user(actor, user_id, {"role": role, "search": search})
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
