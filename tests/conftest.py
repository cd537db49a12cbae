"""Pytest configuration and shared fixtures."""

import io

import pytest
from fastapi import UploadFile
from fastapi.testclient import TestClient
from starlette.datastructures import Headers

from shared.core.config import Settings
from adoption_service.app.main import create_app
from adoption_service.app.models import Space

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 64


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        DATABASE_URL=f"sqlite:///{tmp_path / 'test.db'}",
        UPLOAD_DIR=str(tmp_path / "uploads"),
        MAX_UPLOAD_BYTES=1024,
        SEED_SAMPLE_SPACES=False,
    )


@pytest.fixture
def app(settings):
    app = create_app(settings)
    yield app
    app.state.engine.dispose()


@pytest.fixture
def client(app) -> TestClient:
    with TestClient(app) as client:
        yield client


@pytest.fixture
def db(app):
    session = app.state.session_factory()
    yield session
    session.close()


@pytest.fixture
def uploads(app):
    return app.state.upload_store


@pytest.fixture
def add_space(db):
    def _add_space(name="Bagno 1", cost=3000, description="Arredo bagno completo"):
        space = Space(name=name, description=description, cost=cost)
        db.add(space)
        db.commit()
        db.refresh(space)
        return space
    return _add_space


@pytest.fixture
def png_file():
    def _png_file(field="image", name="photo.png", data=PNG_BYTES, content_type="image/png"):
        return {field: (name, data, content_type)}
    return _png_file


@pytest.fixture
def stored_files(uploads):
    def _stored_files():
        return sorted(p.name for p in uploads.directory.iterdir())
    return _stored_files


@pytest.fixture
def make_upload():
    def _make_upload(name="photo.png", data=PNG_BYTES, content_type="image/png"):
        return UploadFile(
            file=io.BytesIO(data),
            filename=name,
            headers=Headers({"content-type": content_type}),
        )
    return _make_upload
