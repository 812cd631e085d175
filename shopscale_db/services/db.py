from pymongo.mongo_client import MongoClient
from dotenv import load_dotenv
import os

from shopscale_db.db.schema import DATABASE_NAME
from shopscale_db.services.logger import get_logger

logger = get_logger("init_db")

DEFAULT_MONGO_URI = "mongodb://localhost:27017"


def get_client():
    load_dotenv()

    MONGO_URI = os.getenv("MONGO_URI", DEFAULT_MONGO_URI)

    return MongoClient(MONGO_URI)


def get_db(client=None):
    load_dotenv()

    MONGO_DB = os.getenv("MONGO_DB", DATABASE_NAME)
    if MONGO_DB != DATABASE_NAME:
        logger.warning(
            "database_override",
            extra={"extra": {"database": MONGO_DB, "expected": DATABASE_NAME}},
        )

    if client is None:
        client = get_client()
    return client[MONGO_DB]
