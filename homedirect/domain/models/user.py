"""User domain model — a record in the store's 'users' table."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel


class User(BaseModel):
    id: int
    username: str
    email: str
    password_hash: str
    first_name: str
    last_name: str
    middle_name: Optional[str] = None
    phone_number: Optional[str] = None
    is_admin: bool = False
    is_verified: bool = False
    verification_code: Optional[str] = None
    verification_code_issued_at: Optional[datetime] = None
    created_at: datetime

    def __repr__(self):
        return f"<User {self.username}>"
