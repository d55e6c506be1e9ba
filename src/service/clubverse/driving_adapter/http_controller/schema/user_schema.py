"""
User API Schemas - Pydantic models for request/response
"""

from pydantic import BaseModel, EmailStr, Field, SecretStr


class RegisterRequest(BaseModel):
    """Register request schema

    Presence and password length are checked by the domain so the client
    gets the same messages whichever way the request arrives.
    """

    name: str = ''
    email: EmailStr
    password: SecretStr = Field(
        ..., description='At least 6 characters, at most 72 bytes (bcrypt limit)'
    )

    class Config:
        json_schema_extra = {
            'example': {
                'name': 'Alice',
                'email': 'alice@example.com',
                'password': 'secret123',
            }
        }


class LoginRequest(BaseModel):
    """User login request schema"""

    email: str
    password: SecretStr

    class Config:
        json_schema_extra = {'example': {'email': 'alice@example.com', 'password': 'secret123'}}


class MessageResponse(BaseModel):
    message: str


class UserResponse(BaseModel):
    """User response schema (never carries the password hash)"""

    id: int
    email: str
    name: str

    class Config:
        from_attributes = True
        json_schema_extra = {
            'example': {
                'id': 1,
                'email': 'alice@example.com',
                'name': 'Alice',
            }
        }


class LoginResponse(BaseModel):
    message: str
    redirect_to: str
    user: UserResponse


class DashboardResponse(BaseModel):
    user: UserResponse
