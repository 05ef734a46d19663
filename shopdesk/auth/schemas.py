from pydantic import BaseModel
from typing import Literal


class LoginRequest(BaseModel):
    """POST /auth/login"""
    email: str
    password: str


class DemoLoginRequest(BaseModel):
    """POST /auth/login/demo"""
    role: Literal["Admin", "Staff"]
