"""
HTTP routes for the user service API.
"""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from userbase.config import Settings, get_settings
from userbase.db import DbClient, UserRecord
from userbase.dependencies import get_db_client
from userbase.schemas import (
    CreateUserPayload,
    HealthResponse,
    ListUsersResponse,
    UserResponse,
    ValidateNameResponse,
    ValidationErrorResponse,
)
from userbase.validation import MISSING, validate_user_name

logger = logging.getLogger(__name__)

router = APIRouter()

_VALIDATION_RESPONSES = {422: {"model": ValidationErrorResponse}}


def _raw_name(payload: Optional[CreateUserPayload]):
    if payload is None or "name" not in payload.model_fields_set:
        return MISSING
    return payload.name


def _to_response(record: UserRecord) -> UserResponse:
    return UserResponse(
        user_id=record.user_id,
        name=record.name,
        created_at=record.created_at,
    )


@router.get("/health", response_model=HealthResponse)
def health():
    return HealthResponse(status="ok")


@router.post(
    "/users",
    response_model=UserResponse,
    status_code=201,
    responses=_VALIDATION_RESPONSES,
)
def create_user(
    payload: Optional[CreateUserPayload] = None,
    db: DbClient = Depends(get_db_client),
):
    """
    Validate the submitted name and persist a new user.

    Validation errors propagate to the app-level handler, which renders
    them as 422 responses.
    """
    name = validate_user_name(_raw_name(payload))
    record = db.create_user(name)
    return _to_response(record)


@router.post(
    "/users/validate",
    response_model=ValidateNameResponse,
    responses=_VALIDATION_RESPONSES,
)
def validate_user(payload: Optional[CreateUserPayload] = None):
    """Dry run of user creation: normalize the name without storing it."""
    return ValidateNameResponse(name=validate_user_name(_raw_name(payload)))


@router.get("/users", response_model=ListUsersResponse)
def list_users(
    limit: Optional[int] = Query(None, ge=1, le=500),
    db: DbClient = Depends(get_db_client),
    settings: Settings = Depends(get_settings),
):
    limit = min(limit or settings.list_limit, settings.list_limit)
    records = db.list_users(limit=limit)
    return ListUsersResponse(
        users=[_to_response(record) for record in records],
        total=db.count_users(),
    )


@router.get("/users/{user_id}", response_model=UserResponse)
def get_user(user_id: str, db: DbClient = Depends(get_db_client)):
    record = db.get_user(user_id)
    if not record:
        raise HTTPException(status_code=404, detail="User not found")
    return _to_response(record)
