from __future__ import annotations

import logging
from typing import List

from sqlalchemy import delete, update
from sqlalchemy.dialects import postgresql, sqlite
from sqlmodel import Session, select

from ..core.errors import NotFoundError, StorageError
from ..models.favorites import Favorite, FavoriteDetail
from ..models.foods import Food

logger = logging.getLogger(__name__)

# Dialects whose INSERT supports ON CONFLICT ... DO UPDATE
_UPSERT_INSERTS = {
    "sqlite": sqlite.insert,
    "postgresql": postgresql.insert,
}


def _upsert_insert(session: Session):
    dialect = session.get_bind().dialect.name
    try:
        return _UPSERT_INSERTS[dialect]
    except KeyError:
        raise StorageError(f"Favorites upsert not supported on '{dialect}'")


def list_favorites(session: Session) -> List[FavoriteDetail]:
    rows = session.exec(
        select(Favorite.id, Favorite.qty, Food.name, Food.image, Food.price)
        .join(Food, Food.id == Favorite.food_id)
        .order_by(Favorite.id.asc())
    ).all()
    return [
        FavoriteDetail(id=fav_id, qty=qty, name=name, image=image, price=price)
        for fav_id, qty, name, image, price in rows
    ]


def add_favorite(session: Session, food_id: int) -> Favorite:
    """Create the favorite for ``food_id`` with qty 1, or bump its qty by one.

    Runs as a single upsert against the unique ``food_id`` index, so two
    concurrent adds for the same food end up in one row with qty 2.
    The food itself is not looked up.
    """
    insert = _upsert_insert(session)
    stmt = insert(Favorite).values(food_id=food_id, qty=1)
    stmt = stmt.on_conflict_do_update(
        index_elements=["food_id"],
        set_={"qty": Favorite.qty + 1},
    )
    session.exec(stmt)
    session.commit()

    favorite = session.exec(select(Favorite).where(Favorite.food_id == food_id)).one()
    logger.debug("Favorite for food %s now has qty=%s", food_id, favorite.qty)
    return favorite


def set_favorite_qty(session: Session, favorite_id: int, qty: int) -> Favorite:
    result = session.exec(
        update(Favorite).where(Favorite.id == favorite_id).values(qty=qty)
    )
    if result.rowcount == 0:
        session.rollback()
        logger.warning("Favorite %s not found, qty unchanged", favorite_id)
        raise NotFoundError(f"Favorite {favorite_id} not found")
    session.commit()

    favorite = session.get(Favorite, favorite_id)
    if favorite is None:
        # deleted between the update and the re-read
        raise NotFoundError(f"Favorite {favorite_id} not found")
    return favorite


def delete_favorite(session: Session, favorite_id: int) -> int:
    """Delete by id; a missing id is not an error. Returns the affected row count."""
    result = session.exec(delete(Favorite).where(Favorite.id == favorite_id))
    session.commit()
    if result.rowcount == 0:
        logger.debug("Favorite %s already absent", favorite_id)
    return result.rowcount
