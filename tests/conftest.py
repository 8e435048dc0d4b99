from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Makes the signup_api package importable when running tests from a checkout
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from signup_api.core import config as core_config  # noqa: E402
from signup_api.core.rate_limiter import reset_rate_limits  # noqa: E402
from signup_api.db import models  # noqa: E402
from signup_api.db import session as db_session  # noqa: E402


@pytest.fixture()
def db_env(tmp_path, monkeypatch):
    """Point DATABASE_URL at a temporary SQLite file and reset settings/engine caches."""
    db_file = tmp_path / "test.db"
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{db_file}")
    core_config.get_settings.cache_clear()
    db_session.dispose_engine()

    engine = db_session.get_engine()
    models.Base.metadata.drop_all(bind=engine)
    models.Base.metadata.create_all(bind=engine)

    yield db_file

    try:
        models.Base.metadata.drop_all(bind=engine)
    finally:
        db_session.dispose_engine()
        core_config.get_settings.cache_clear()


@pytest.fixture(autouse=True)
def _clear_rate_limits():
    reset_rate_limits()
    yield
    reset_rate_limits()


@pytest.fixture()
def signup_body():
    return {
        "name": "any name",
        "email": "any_email@mail.com",
        "password": "any_password",
        "passwordConfirmation": "any_password",
    }
