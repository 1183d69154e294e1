# users_api/models/users.py

from pydantic import BaseModel


class UserRecord(BaseModel):
    name: str = ""
    email: str = ""


class UserOut(BaseModel):
    id: str
    user: UserRecord


class AddUserResponse(BaseModel):
    message: str
    id: str
    user: UserRecord
