"""
Pydantic schemas for the user service API.
"""

from __future__ import annotations

from typing import Any, Literal, Optional

from pydantic import BaseModel


class CreateUserPayload(BaseModel):
    name: Optional[Any] = None


class UserResponse(BaseModel):
    user_id: str
    name: str
    created_at: float


class ListUsersResponse(BaseModel):
    users: list[UserResponse]
    total: int


class ValidateNameResponse(BaseModel):
    name: str


class ValidationErrorDetail(BaseModel):
    error: str
    field: str
    message: str


class ValidationErrorResponse(BaseModel):
    detail: ValidationErrorDetail


class HealthResponse(BaseModel):
    status: Literal["ok"]
