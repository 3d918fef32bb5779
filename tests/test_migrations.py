from decimal import Decimal
from pathlib import Path

import pytest
from alembic import command
from alembic.config import Config
from sqlalchemy import inspect
from sqlalchemy.orm import Session

from product_catalog import repositories
from product_catalog.core.db import create_db_engine
from product_catalog.entities import FurnitureProduct

ROOT = Path(__file__).resolve().parents[1]


@pytest.fixture
def migrated_url(tmp_path, monkeypatch) -> str:
    url = f"sqlite:///{tmp_path / 'migrated.db'}"
    monkeypatch.setenv("DATABASE_URL", url)

    # No ini file: keeps alembic from reconfiguring logging mid-run.
    cfg = Config()
    cfg.set_main_option("script_location", str(ROOT / "alembic"))
    cfg.set_main_option("sqlalchemy.url", url)
    command.upgrade(cfg, "head")
    return url


def test_upgrade_creates_parent_and_child_tables(migrated_url):
    engine = create_db_engine(migrated_url)
    try:
        inspector = inspect(engine)
        tables = set(inspector.get_table_names())
        assert {"products", "dvd_products", "book_products", "furniture_products"} <= tables

        for child in ("dvd_products", "book_products", "furniture_products"):
            assert inspector.get_pk_constraint(child)["constrained_columns"] == ["id"]
            (fk,) = inspector.get_foreign_keys(child)
            assert fk["referred_table"] == "products"
            assert fk["options"].get("ondelete") == "CASCADE"
    finally:
        engine.dispose()


def test_migrated_schema_supports_save_and_cascade(migrated_url):
    engine = create_db_engine(migrated_url)
    try:
        with Session(engine, expire_on_commit=False) as db:
            saved = repositories.save_product(
                db,
                FurnitureProduct(sku="F-1", name="Desk", price=Decimal("120"), height=75, width=140, length=70),
            )
            assert repositories.find_by_id(db, saved.id) == saved
            assert repositories.delete_by_ids(db, [saved.id]) == 1
            assert repositories.find_all(db) == []
    finally:
        engine.dispose()
