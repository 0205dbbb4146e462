"""Catalog seeding from the bundled JSON files in ``seed/data``."""

import json
from pathlib import Path
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from src.party_planner.core.logging import get_logger
from src.party_planner.models import CATALOG_MODELS, CatalogCollection
from src.party_planner.repositories import CatalogRepository

logger = get_logger(__name__)

DATA_DIR = Path(__file__).parent / "data"


def load_seed_records(collection: CatalogCollection) -> list[dict[str, Any]]:
    """Read ``data/<collection>.json``. Missing files seed nothing."""
    path = DATA_DIR / f"{collection.value}.json"
    if not path.exists():
        logger.warning("Seed file missing", collection=collection.value, path=str(path))
        return []
    with path.open(encoding="utf-8") as f:
        return json.load(f)


async def seed_catalog(session: AsyncSession) -> dict[str, int]:
    """Replace every catalog collection with the bundled records.

    Runs as a single transaction: either all five collections are reseeded
    or none are. Returns the number of items inserted per collection.
    """
    counts: dict[str, int] = {}
    try:
        for collection, model in CATALOG_MODELS.items():
            repo = CatalogRepository(session, collection)
            await repo.delete_all()

            records = load_seed_records(collection)
            for record in records:
                # Unknown keys are ignored so data files can carry extra notes
                fields = {key: value for key, value in record.items() if key in model.model_fields}
                repo.add(model(**fields))
            counts[collection.value] = len(records)

        await session.commit()
    except Exception:
        await session.rollback()
        raise

    logger.info("Catalog seeded", **counts)
    return counts
