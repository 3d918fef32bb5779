from typing import Any, Generator

from fastapi import Request
from sqlalchemy.orm import Session

from product_catalog.core.db import get_sessionmaker
from product_catalog.core.errors import BadRequestError


def get_db() -> Generator[Session, None, None]:
    SessionLocal = get_sessionmaker()
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


async def get_json_body(request: Request) -> dict[str, Any]:
    """
    Dependency returning the request body as a JSON object.

    Anything that is not a JSON object (empty body, broken JSON, a list...)
    is a 400, not a validation error.
    """
    try:
        data = await request.json()
    except ValueError as exc:
        raise BadRequestError("Invalid JSON data") from exc

    if not isinstance(data, dict):
        raise BadRequestError("Invalid JSON data")
    return data
