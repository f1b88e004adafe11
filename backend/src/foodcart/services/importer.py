"""CSV catalog import (name,image,price), validated like ``POST /foods``."""
from __future__ import annotations

import csv
import logging
from typing import Iterable, Iterator, Optional, Tuple

from pydantic import ValidationError
from sqlmodel import Session

from ..models.foods import FoodCreate
from .foods import create_food

logger = logging.getLogger(__name__)

HEADER = ["name", "image", "price"]


def parse_rows(lines: Iterable[str]) -> Iterator[Tuple[int, Optional[FoodCreate]]]:
    """Yield (line number, FoodCreate) per data row; rejected rows carry None."""
    reader = csv.reader(lines)
    for line_no, row in enumerate(reader, start=1):
        cells = [cell.strip() for cell in row]
        if not cells or all(not cell for cell in cells):
            continue
        if line_no == 1 and [c.lower() for c in cells] == HEADER:
            continue
        if len(cells) != 3:
            logger.warning("Skipped line %d (expected 3 columns): %s", line_no, row)
            yield line_no, None
            continue

        name, image, price = cells
        try:
            yield line_no, FoodCreate.model_validate({"name": name, "image": image, "price": price})
        except ValidationError as e:
            logger.warning("Skipped line %d %s: %s", line_no, row, e.errors(include_url=False))
            yield line_no, None


def import_foods(session: Session, lines: Iterable[str]) -> Tuple[int, int]:
    """Insert every valid row. Returns (imported, skipped)."""
    imported = skipped = 0
    for _, payload in parse_rows(lines):
        if payload is None:
            skipped += 1
            continue
        create_food(session, payload)
        imported += 1
    return imported, skipped
