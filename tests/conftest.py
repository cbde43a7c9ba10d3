from __future__ import annotations

from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from config import Settings
from main import create_app


@pytest.fixture
def settings() -> Settings:
    return Settings(database_url="sqlite://", log_level="DEBUG")


@pytest.fixture
def client(settings: Settings) -> Generator[TestClient, None, None]:
    """Client bound to a fresh in-memory database; entering it runs the app lifespan."""
    with TestClient(create_app(settings)) as test_client:
        yield test_client


@pytest.fixture
def db(client: TestClient) -> Generator[Session, None, None]:
    session = client.app.state.session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def add_products(db: Session):
    import models

    def _add(*names: str, image_url: str = "img.png") -> list[models.Product]:
        rows = [models.Product(name=name, image_url=image_url) for name in names]
        db.add_all(rows)
        db.commit()
        for row in rows:
            db.refresh(row)
        return rows

    return _add
