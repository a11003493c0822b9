import pytest

from app import app as flask_app


@pytest.fixture()
def app(tmp_path):
    flask_app.config.update(
        TESTING=True,
        ERROR_LOG=str(tmp_path / "last_error.log"),
    )
    yield flask_app


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def api_key(monkeypatch):
    monkeypatch.setenv("GEMINI_API_KEY", "test-key")


@pytest.fixture()
def no_api_key(monkeypatch):
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)
