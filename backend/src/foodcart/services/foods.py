from __future__ import annotations

import logging
from typing import List

from sqlalchemy import func
from sqlmodel import Session, select

from ..models.foods import Food, FoodCreate

logger = logging.getLogger(__name__)

DEFAULT_FOODS = (
    ("Pizza", "img/pizza.png", 16000),
    ("Burger", "img/burger.png", 3500),
    ("Quzi", "img/quzi.png", 25000),
    ("Pasta", "img/pasta.png", 18000),
    ("Salad", "img/salad.png", 7000),
    ("Dolma", "img/dolma.png", 25000),
)


def list_foods(session: Session) -> List[Food]:
    return list(session.exec(select(Food).order_by(Food.id.asc())).all())


def create_food(session: Session, payload: FoodCreate) -> Food:
    food = Food.model_validate(payload)
    session.add(food)
    session.commit()
    session.refresh(food)
    logger.info("Created food %s (id=%s)", food.name, food.id)
    return food


def seed_default_foods(session: Session) -> int:
    """Insert the default catalog if, and only if, ``foods`` is empty.

    Returns the number of rows inserted (0 when the catalog already had data).
    """
    count = session.exec(select(func.count()).select_from(Food)).one()
    if count:
        return 0

    session.add_all(Food(name=name, image=image, price=price) for name, image, price in DEFAULT_FOODS)
    session.commit()
    logger.info("Database seeded with default foods.")
    return len(DEFAULT_FOODS)
