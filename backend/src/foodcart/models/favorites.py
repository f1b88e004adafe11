from typing import Optional
from sqlmodel import SQLModel, Field

from .common import DB_INT_MAX, DB_INT_MIN

class Favorite(SQLModel, table=True):
    __tablename__ = "favorites"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Optional[int] = Field(default=None, primary_key=True)
    # One row per food; the unique index is the conflict target of the upsert.
    # The FK is declarative only, SQLite does not enforce it by default.
    food_id: int = Field(foreign_key="foods.id", unique=True)
    qty: int = Field(default=1, sa_column_kwargs={"server_default": "1"})

class FavoriteCreate(SQLModel):
    food_id: int = Field(ge=DB_INT_MIN, le=DB_INT_MAX)

class FavoriteQtyUpdate(SQLModel):
    qty: int = Field(ge=1, le=DB_INT_MAX)

class FavoriteRead(SQLModel):
    id: int
    food_id: int
    qty: int

class FavoriteDetail(SQLModel):
    """Favorite joined with its food (orphans never show up here)."""
    id: int
    qty: int
    name: str
    image: str
    price: int

class DeleteResult(SQLModel):
    success: bool = True
