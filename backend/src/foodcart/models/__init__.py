from .favorites import (  # noqa: F401
    DeleteResult,
    Favorite,
    FavoriteCreate,
    FavoriteDetail,
    FavoriteQtyUpdate,
    FavoriteRead,
)
from .foods import Food, FoodCreate, FoodRead  # noqa: F401
