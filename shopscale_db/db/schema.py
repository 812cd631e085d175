"""
Target schema for the product catalogue database.

Collections and indexes are declared as data so the initializer can apply
them in order without any per-collection code.
"""

from pymongo import ASCENDING, TEXT

DATABASE_NAME = "productdb"

PRODUCTS = "products"
CATEGORIES = "categories"

COLLECTIONS = (PRODUCTS, CATEGORIES)

# (collection, keys, create_index options)
INDEXES = [
    (PRODUCTS, [("productId", ASCENDING)], {"unique": True}),
    (PRODUCTS, [("category", ASCENDING)], {}),
    # Full-text search over product name and description
    (PRODUCTS, [("name", TEXT), ("description", TEXT)], {}),
    (PRODUCTS, [("price", ASCENDING)], {}),
    (PRODUCTS, [("createdAt", ASCENDING)], {}),
]
