"""Create (or recreate) the accounts schema on the configured database."""
from __future__ import annotations

import argparse
import logging

from sqlalchemy.exc import SQLAlchemyError

from signup_api.core.config import get_settings
from signup_api.core.logging_config import configure_logging

from .session import Base, get_engine
from . import models  # noqa: F401  # ensure models are imported for metadata

logger = logging.getLogger(__name__)


def create_all(*, drop_first: bool = False) -> None:
    engine = get_engine()
    if drop_first:
        Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    logger.info("Schema ready on %s", engine.url.render_as_string(hide_password=True))


def main() -> None:
    ap = argparse.ArgumentParser(description="Create the accounts table")
    ap.add_argument("--drop", action="store_true", help="drop existing tables before creating them")
    args = ap.parse_args()
    configure_logging(get_settings().log_level)
    try:
        create_all(drop_first=args.drop)
    except SQLAlchemyError as exc:
        raise SystemExit(f"Failed to create tables: {exc}") from exc


if __name__ == "__main__":
    main()
