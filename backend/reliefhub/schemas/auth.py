"""
ReliefHub Backend — Authentication Schemas
============================================

What:  Request and response bodies for /register and /login.

Emails are compared exactly as stored: no lower-casing or format checks.
"""

from pydantic import BaseModel, Field


class RegisterRequest(BaseModel):
    name: str = Field(description="Display name embedded in issued tokens")
    email: str = Field(description="Login identifier, unique across users")
    password: str = Field(description="Plaintext password; only its hash is stored")


class LoginRequest(BaseModel):
    email: str
    password: str


class LoginResponse(BaseModel):
    success: bool = Field(default=True)
    message: str = Field(default="Login successful")
    token: str = Field(description="Signed bearer token carrying email and name")
