from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class Role(str, Enum):
    ADMIN = "admin"
    STAFF = "staff"


class Session(BaseModel):
    """The currently authenticated user. No expiry: valid until logout."""

    id: str = Field(min_length=1)
    email: str
    role: Role
    token: Optional[str] = None

    def to_public(self) -> dict:
        return self.model_dump(mode="json", exclude_none=True)
