"""
Pydantic schemas for User and Authentication.
"""
from pydantic import BaseModel, EmailStr, Field
from typing import Optional

from autocare_console.schemas.common import CamelModel


class SignInData(CamelModel):
    """Schema for login request."""
    username: str
    password: str


class SignUpData(CamelModel):
    """Schema for registering a user."""
    fname: str
    lname: str
    email: EmailStr
    password: str
    mobile_number: str
    address: str
    role: str = "USER"


class ForgetPassword(CamelModel):
    email: EmailStr


class VerifyEmail(CamelModel):
    email: EmailStr
    otp: str


class UpdatePasswordData(CamelModel):
    email: EmailStr
    new_password: str


class Token(BaseModel):
    """Schema for the token returned by the login endpoint."""
    token: str


class DecodedToken(BaseModel):
    """Claims carried in the backend's access token."""
    sub: str = ""
    firstname: Optional[str] = None
    user_id: Optional[int] = Field(None, alias="userId")
    component_names: list[str] = Field(default_factory=list, alias="componentNames")
    authorities: list[str] = Field(default_factory=list)
    roles: list[str] = Field(default_factory=list)
    is_enable: bool = Field(True, alias="isEnable")
    iat: Optional[int] = None
    exp: Optional[int] = None


class ConsoleUser(BaseModel):
    """Signed-in user as shown in the console header."""
    is_authenticated: bool = False
    name: str = ""
    role: str = ""
    components: list[str] = Field(default_factory=list)
