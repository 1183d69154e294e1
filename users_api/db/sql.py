# users_api/db/sql.py
"""
SQL-backed user store for local development and tests.

Documents live in a single table (see schema.build_users_table) and are
keyed by Firestore-style generated ids.
"""

import secrets
import string

from sqlalchemy import select
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from users_api.db.schema import build_users_table
from users_api.db.store import (
    ScanResult,
    StoreError,
    UserNotFound,
    UserStore,
    record_from_document,
)
from users_api.models.users import UserOut, UserRecord

AUTO_ID_ALPHABET = string.ascii_letters + string.digits
AUTO_ID_LENGTH = 20


def generate_id() -> str:
    return "".join(secrets.choice(AUTO_ID_ALPHABET) for _ in range(AUTO_ID_LENGTH))


class SqlUserStore(UserStore):
    def __init__(self, engine: Engine, table_name: str = "users"):
        self.engine = engine
        self.users = build_users_table(table_name)

    def create_schema(self) -> None:
        self.users.metadata.create_all(self.engine)

    def add_user(self, user: UserRecord) -> str:
        user_id = generate_id()
        try:
            with self.engine.begin() as conn:
                conn.execute(
                    self.users.insert().values(id=user_id, data=user.model_dump())
                )
        except SQLAlchemyError as e:
            raise StoreError(f"Error adding user: {e}") from e
        return user_id

    def get_user(self, user_id: str) -> UserRecord:
        try:
            with self.engine.connect() as conn:
                stmt = select(self.users.c.data).where(self.users.c.id == user_id)
                row = conn.execute(stmt).first()
        except SQLAlchemyError as e:
            raise StoreError(f"Error reading user {user_id!r}: {e}") from e

        if row is None:
            raise UserNotFound(user_id)

        return record_from_document(row.data)

    def scan_users(self) -> ScanResult:
        result = ScanResult()
        try:
            with self.engine.connect() as conn:
                stmt = select(self.users.c.id, self.users.c.data).order_by(self.users.c.id)
                for row in conn.execute(stmt):
                    result.users.append(
                        UserOut(id=row.id, user=record_from_document(row.data))
                    )
        except SQLAlchemyError as e:
            result.error = StoreError(f"Scan of {self.users.name!r} stopped: {e}")
            result.error.__cause__ = e
        return result

    def close(self) -> None:
        self.engine.dispose()
