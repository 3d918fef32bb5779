from product_catalog.core.config import Settings


def test_database_url_wins_over_pieces(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "  sqlite:///./x.db ")
    assert Settings().database_url_resolved == "sqlite:///./x.db"


def test_database_url_built_from_pieces(monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)
    monkeypatch.setenv("DB_HOST", "db")
    monkeypatch.setenv("DB_PORT", "5433")
    monkeypatch.setenv("DB_NAME", "catalog")
    monkeypatch.setenv("DB_USER", "app")
    monkeypatch.setenv("DB_PASSWORD", "pwd")

    assert Settings().database_url_resolved == "postgresql+psycopg://app:pwd@db:5433/catalog"


def test_cors_origins_list(monkeypatch):
    monkeypatch.setenv("CORS_ALLOWED_ORIGINS", "http://a.test, ,http://b.test")
    assert Settings().cors_origins_list() == ["http://a.test", "http://b.test"]
