from typing import Dict, Iterable, List

from shopscale_db.services.logger import get_logger

logger = get_logger("init_db")


def ensure_collections(db, names: Iterable[str]) -> List[str]:
    existing = set(db.list_collection_names())

    created = []
    for name in names:
        if name in existing:
            continue
        db.create_collection(name)
        created.append(name)

    logger.info(
        "collections_ensured",
        extra={"extra": {"created": created, "existing": sorted(existing)}},
    )
    return created


def ensure_indexes(db, specs) -> List[str]:
    names = []
    for collection, keys, options in specs:
        name = db[collection].create_index(keys, background=True, **options)
        logger.info(
            "index_ensured",
            extra={"extra": {"collection": collection, "index": name}},
        )
        names.append(name)
    return names


def describe_indexes(db, collection: str) -> Dict[str, dict]:
    return {
        idx["name"]: dict(idx["key"]) for idx in db[collection].list_indexes()
    }
