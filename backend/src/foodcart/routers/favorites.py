from typing import List
from fastapi import APIRouter, Depends, Path
from sqlmodel import Session

from foodcart.core.database import get_session
from foodcart.models.common import DB_INT_MAX, DB_INT_MIN
from foodcart.models.favorites import (
    DeleteResult,
    FavoriteCreate,
    FavoriteDetail,
    FavoriteQtyUpdate,
    FavoriteRead,
)
from foodcart.services import favorites as favorite_service

router = APIRouter(prefix="/favorites", tags=["favorites"])


@router.get("", response_model=List[FavoriteDetail], summary="Favorites joined with their foods")
def list_favorites(session: Session = Depends(get_session)):
    return favorite_service.list_favorites(session)


@router.post("", response_model=FavoriteRead, summary="Add a food to favorites or bump its qty")
def add_favorite(payload: FavoriteCreate, session: Session = Depends(get_session)):
    return favorite_service.add_favorite(session, payload.food_id)


@router.patch("/{favorite_id}", response_model=FavoriteRead, summary="Set the qty of a favorite")
def set_favorite_qty(
    payload: FavoriteQtyUpdate,
    favorite_id: int = Path(..., ge=DB_INT_MIN, le=DB_INT_MAX),
    session: Session = Depends(get_session),
):
    return favorite_service.set_favorite_qty(session, favorite_id, payload.qty)


@router.delete("/{favorite_id}", response_model=DeleteResult, summary="Remove a favorite (idempotent)")
def delete_favorite(
    favorite_id: int = Path(..., ge=DB_INT_MIN, le=DB_INT_MAX),
    session: Session = Depends(get_session),
):
    favorite_service.delete_favorite(session, favorite_id)
    return DeleteResult(success=True)
