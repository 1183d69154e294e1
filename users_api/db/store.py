# users_api/db/store.py
"""
Common interface for user stores.

A store exposes three operations on the users collection:

    add_user(user)   -> generated id
    get_user(id)     -> UserRecord, raises UserNotFound / StoreError
    scan_users()     -> ScanResult

Backend errors never leave a store unwrapped; callers only deal with
StoreError and its subclasses.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, List, Mapping, Optional

from users_api.models.users import UserOut, UserRecord


class StoreError(Exception):
    """A store operation failed."""


class UserNotFound(StoreError):
    def __init__(self, user_id: str):
        super().__init__(f"User not found: {user_id}")
        self.user_id = user_id


class StartupFailure(Exception):
    """The store could not be initialised; the process cannot serve requests."""


@dataclass
class ScanResult:
    """
    Records read by a full collection scan.

    A scan stops at the first read failure. ``error`` holds that failure,
    ``users`` holds everything read before it.
    """

    users: List[UserOut] = field(default_factory=list)
    error: Optional[StoreError] = None

    @property
    def truncated(self) -> bool:
        return self.error is not None


def record_from_document(data: Optional[Mapping[str, Any]]) -> UserRecord:
    # Missing or non-string fields come back as empty strings.
    if not isinstance(data, Mapping):
        data = {}
    values = {}
    for key in ("name", "email"):
        value = data.get(key)
        values[key] = value if isinstance(value, str) else ""
    return UserRecord(**values)


class UserStore(ABC):
    @abstractmethod
    def add_user(self, user: UserRecord) -> str:
        ...

    @abstractmethod
    def get_user(self, user_id: str) -> UserRecord:
        ...

    @abstractmethod
    def scan_users(self) -> ScanResult:
        ...

    def close(self) -> None:
        pass
