# users_api/db/factory.py

import logging

from users_api.config import Settings
from users_api.db.store import StartupFailure, UserStore

logger = logging.getLogger(__name__)


def build_store(settings: Settings) -> UserStore:
    """Create the store selected by STORE_BACKEND, or raise StartupFailure."""
    if settings.STORE_BACKEND == "sql":
        from sqlalchemy.exc import SQLAlchemyError

        from users_api.db.engine import get_engine
        from users_api.db.sql import SqlUserStore

        try:
            store = SqlUserStore(get_engine(settings.DATABASE_URL), settings.USERS_COLLECTION)
            store.create_schema()
        except (SQLAlchemyError, ValueError) as e:
            raise StartupFailure(f"Failed to initialize SQL store: {e}") from e

        logger.info("Using SQL user store at %s", settings.DATABASE_URL)
        return store

    from users_api.db.firestore import FirestoreUserStore, create_client

    if not settings.GOOGLE_APPLICATION_CREDENTIALS:
        raise StartupFailure("GOOGLE_APPLICATION_CREDENTIALS is not set")
    if not settings.FIRESTORE_PROJECT_ID:
        raise StartupFailure("FIRESTORE_PROJECT_ID is not set")

    client = create_client(
        settings.GOOGLE_APPLICATION_CREDENTIALS,
        settings.FIRESTORE_PROJECT_ID,
    )
    logger.info(
        "Connected to Firestore project %s (collection %r)",
        settings.FIRESTORE_PROJECT_ID,
        settings.USERS_COLLECTION,
    )
    return FirestoreUserStore(client, settings.USERS_COLLECTION)
