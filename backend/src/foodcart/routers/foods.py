from typing import List
from fastapi import APIRouter, Depends
from sqlmodel import Session

from foodcart.core.database import get_session
from foodcart.models.foods import FoodCreate, FoodRead
from foodcart.services import foods as food_service

router = APIRouter(prefix="/foods", tags=["foods"])


@router.get("", response_model=List[FoodRead], summary="All foods in storage order")
def list_foods(session: Session = Depends(get_session)):
    return food_service.list_foods(session)


@router.post("", response_model=FoodRead, summary="Add a food to the catalog")
def create_food(payload: FoodCreate, session: Session = Depends(get_session)):
    """Name and image must be non-empty, price a positive integer; anything else is a 400."""
    return food_service.create_food(session, payload)
