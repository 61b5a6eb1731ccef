"""Storage of products in an SQLite database."""

from __future__ import annotations

import os
import sqlite3
from dataclasses import dataclass

from textbench.uuid7 import UUIDv7Generator

_INSERT_SQL = (
    "insert into products (id, title, slug, description, base_price) "
    "values (?, ?, ?, ?, ?)"
)
_TITLES_SQL = "select title, base_price from products"
_FIRST_SQL = (
    "select id, title, slug, description, base_price, inserted_at, updated_at "
    "from products limit 1"
)


@dataclass(frozen=True)
class Product:
    """A product row; ``description`` may be missing."""

    title: str
    slug: str
    description: str | None = None
    base_price: float = 0.0
    id: bytes | int | None = None
    inserted_at: int | str | None = None
    updated_at: int | str | None = None


SAMPLE_PRODUCTS = (
    Product(
        title="Steamed Hams",
        slug="steamed-hams",
        description="Two pieces of a bun with a beef patty inside.",
        base_price=42.0,
    ),
    Product(
        title="Cheeseburger",
        slug="cheeseburger",
        description="Same as a steamed ham, but with a slice of American cheese.",
        base_price=48.0,
    ),
)


def connect(path: str | os.PathLike[str]) -> sqlite3.Connection:
    """Open the database at ``path``; raises sqlite3.Error when it cannot be opened."""
    conn = sqlite3.connect(os.fspath(path))
    try:
        conn.execute("select 1").fetchone()
    except sqlite3.Error:
        conn.close()
        raise
    return conn


def insert_product(
    conn: sqlite3.Connection, product: Product, generator: UUIDv7Generator
) -> bytes:
    """Insert ``product`` under a fresh version 7 UUID and return that id."""
    product_id = generator.generate()
    with conn:
        conn.execute(
            _INSERT_SQL,
            (
                product_id,
                product.title,
                product.slug,
                product.description,
                product.base_price,
            ),
        )
    return product_id


def list_titles(conn: sqlite3.Connection) -> list[str]:
    """Return the titles of all products."""
    return [title for title, _price in conn.execute(_TITLES_SQL)]


def first_product(conn: sqlite3.Connection) -> Product | None:
    """Return the first product row, or None if the table is empty."""
    row = conn.execute(_FIRST_SQL).fetchone()
    if row is None:
        return None
    product_id, title, slug, description, base_price, inserted_at, updated_at = row
    return Product(
        title=title,
        slug=slug,
        description=description,
        base_price=base_price,
        id=product_id,
        inserted_at=inserted_at,
        updated_at=updated_at,
    )