import datetime
from datetime import timezone

from shopscale_db.db.schema import CATEGORIES, PRODUCTS
from shopscale_db.services.db import get_db
from shopscale_db.services.logger import get_logger

logger = get_logger("init_db")


def _utcnow():
    return datetime.datetime.now(timezone.utc)


def sample_products(now):
    return [
        {
            "productId": "prod_001",
            "name": "Premium Laptop",
            "description": "High-performance laptop for professionals with 16GB RAM and 512GB SSD",
            "price": 1299.99,
            "category": "electronics",
            "stockQuantity": 50,
            "attributes": {
                "brand": "TechCorp",
                "model": "Pro-X1",
                "specifications": {
                    "ram": "16GB",
                    "storage": "512GB SSD",
                    "processor": "Intel i7",
                    "screen": "15.6 inch 4K",
                },
            },
            "createdAt": now,
            "updatedAt": now,
        },
        {
            "productId": "prod_002",
            "name": "Wireless Headphones",
            "description": "Premium noise-cancelling wireless headphones with 30-hour battery life",
            "price": 299.99,
            "category": "electronics",
            "stockQuantity": 100,
            "attributes": {
                "brand": "AudioMax",
                "model": "NC-Pro",
                "specifications": {
                    "batteryLife": "30 hours",
                    "noiseCancelling": True,
                    "wireless": True,
                    "color": "Black",
                },
            },
            "createdAt": now,
            "updatedAt": now,
        },
        {
            "productId": "prod_003",
            "name": "Smart Watch",
            "description": "Advanced fitness tracking smartwatch with heart rate monitor",
            "price": 399.99,
            "category": "electronics",
            "stockQuantity": 75,
            "attributes": {
                "brand": "FitTech",
                "model": "Smart-Pro",
                "specifications": {
                    "batteryLife": "7 days",
                    "waterproof": True,
                    "heartRateMonitor": True,
                    "gps": True,
                },
            },
            "createdAt": now,
            "updatedAt": now,
        },
    ]


def sample_categories(now):
    return [
        {
            "categoryId": "cat_001",
            "name": "Electronics",
            "description": "Electronic devices and gadgets",
            "parentCategory": None,
            "createdAt": now,
        },
        {
            "categoryId": "cat_002",
            "name": "Computers",
            "description": "Laptops, desktops, and computer accessories",
            "parentCategory": "cat_001",
            "createdAt": now,
        },
        {
            "categoryId": "cat_003",
            "name": "Audio",
            "description": "Headphones, speakers, and audio equipment",
            "parentCategory": "cat_001",
            "createdAt": now,
        },
    ]


def _insert(db, collection, docs):
    # No existence check: a second run fails on the productId unique index.
    result = db[collection].insert_many(docs)
    count = len(result.inserted_ids)
    logger.info(
        "documents_inserted",
        extra={"extra": {"collection": collection, "count": count}},
    )
    return count


def seed_products(db, now=None):
    return _insert(db, PRODUCTS, sample_products(now or _utcnow()))


def seed_categories(db, now=None):
    return _insert(db, CATEGORIES, sample_categories(now or _utcnow()))


def run():
    db = get_db()
    now = _utcnow()
    seed_products(db, now)
    seed_categories(db, now)
    print("Seeder finished.")


if __name__ == "__main__":
    run()
