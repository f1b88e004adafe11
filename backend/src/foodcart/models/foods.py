from typing import Optional
from sqlmodel import SQLModel, Field

from .common import DB_INT_MAX

class FoodBase(SQLModel):
    name: str
    image: str = Field(description="path or reference to the image, e.g. img/pizza.png")
    price: int

class Food(FoodBase, table=True):
    __tablename__ = "foods"
    # ids are never reused, matching AUTOINCREMENT
    __table_args__ = {"sqlite_autoincrement": True}

    id: Optional[int] = Field(default=None, primary_key=True)

class FoodCreate(FoodBase):
    name: str = Field(min_length=1)
    image: str = Field(min_length=1)
    # Minor units, no currency attached; free items are not accepted
    price: int = Field(gt=0, le=DB_INT_MAX)

class FoodRead(FoodBase):
    id: int
