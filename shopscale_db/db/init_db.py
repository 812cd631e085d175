import datetime
import os
from datetime import timezone

from dotenv import load_dotenv

from shopscale_db.db import seeder, utils
from shopscale_db.db.schema import COLLECTIONS, INDEXES, PRODUCTS
from shopscale_db.services.db import get_db
from shopscale_db.services.logger import get_logger

logger = get_logger("init_db")

COMPLETION_MESSAGE = "MongoDB initialization completed successfully!"


def initialize(db):
    """
    Apply the product catalogue schema to ``db`` and load the sample data.

    Steps run in a fixed order: collections, indexes, documents, completion
    message. Collection and index creation are safe to repeat; the document
    inserts are not, so a second run raises ``BulkWriteError`` on the
    ``productId`` unique index. Any driver error aborts the sequence and is
    re-raised unchanged, leaving earlier steps in place.
    """
    logger.info("init_started", extra={"extra": {"database": db.name}})
    try:
        created = utils.ensure_collections(db, COLLECTIONS)
        indexes = utils.ensure_indexes(db, INDEXES)
        logger.info(
            "indexes_present",
            extra={"extra": {"indexes": utils.describe_indexes(db, PRODUCTS)}},
        )

        now = datetime.datetime.now(timezone.utc)
        products = seeder.seed_products(db, now)
        categories = seeder.seed_categories(db, now)
    except Exception:
        logger.exception("init_failed", extra={"extra": {"database": db.name}})
        raise

    print(COMPLETION_MESSAGE)
    return {
        "collections_created": created,
        "indexes": indexes,
        "products_inserted": products,
        "categories_inserted": categories,
    }


def run_initializer():
    load_dotenv()

    if os.getenv("SKIP_INIT", "false").lower() == "true":
        print("SKIP_INIT is set. Exiting without initializing the database.")
        return None

    return initialize(get_db())


def main():
    run_initializer()


if __name__ == "__main__":
    main()
