# users_api/api/users.py

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response
from pydantic import ValidationError

from users_api.db.store import StoreError, UserStore
from users_api.models.users import AddUserResponse, UserOut, UserRecord

logger = logging.getLogger(__name__)

router = APIRouter(tags=["users"])

TRUNCATED_HEADER = "X-Scan-Truncated"


def get_store(request: Request) -> UserStore:
    return request.app.state.store


async def read_user_body(request: Request) -> UserRecord:
    # Decode the body as JSON whatever the Content-Type says; curl -d sends
    # application/x-www-form-urlencoded.
    body = await request.body()
    try:
        return UserRecord.model_validate_json(body)
    except ValidationError as e:
        logger.info("Rejected /addUser body: %s", e.errors())
        raise HTTPException(status_code=400, detail="Invalid request body")


@router.post("/addUser", response_model=AddUserResponse)
def add_user(
    user: UserRecord = Depends(read_user_body),
    store: UserStore = Depends(get_store),
) -> AddUserResponse:
    """
    Store a new user; the store assigns the id.
    """
    try:
        user_id = store.add_user(user)
    except StoreError as e:
        logger.warning("addUser failed: %s", e)
        raise HTTPException(status_code=500, detail="Error adding user")

    return AddUserResponse(
        message="User added successfully",
        id=user_id,
        user=user,
    )


@router.get("/getUser", response_model=UserOut)
def get_user(
    id: Optional[str] = Query(default=None, description="Document id returned by /addUser"),
    store: UserStore = Depends(get_store),
) -> UserOut:
    """
    Look up a single user by id.

    Any lookup failure is reported as 404, whether the document is missing
    or the store could not be reached.
    """
    if not id:
        raise HTTPException(status_code=400, detail="User ID required")

    try:
        user = store.get_user(id)
    except StoreError as e:
        logger.warning("getUser %r failed: %s", id, e)
        raise HTTPException(status_code=404, detail="User not found")

    return UserOut(id=id, user=user)


@router.get("/listUsers", response_model=List[UserOut])
def list_users(response: Response, store: UserStore = Depends(get_store)) -> List[UserOut]:
    """
    Return every user in the collection.

    A scan that fails part way still returns 200 with the users read so far;
    the response carries X-Scan-Truncated: true in that case.
    """
    result = store.scan_users()

    if result.truncated:
        logger.warning(
            "listUsers returned %d users from a truncated scan: %s",
            len(result.users),
            result.error,
        )
        response.headers[TRUNCATED_HEADER] = "true"

    return result.users
