"""Bulk-load catalog foods from a CSV file (name,image,price)."""
import sys
from pathlib import Path

from sqlmodel import Session

from foodcart.core.config import get_settings
from foodcart.core.database import build_engine, init_db
from foodcart.core.logging_config import configure_logging
from foodcart.services.importer import import_foods


def main(csv_path: Path) -> None:
    settings = get_settings()
    configure_logging(settings.log_level)
    engine = build_engine(settings)
    init_db(engine)
    try:
        with Session(engine) as session, csv_path.open(newline="", encoding="utf-8") as f:
            imported, skipped = import_foods(session, f)
    finally:
        engine.dispose()
    print(f"Foods import done: {imported} imported, {skipped} skipped.")


if __name__ == "__main__":
    main(Path(sys.argv[1]) if len(sys.argv) > 1 else Path("data/foods.csv"))
