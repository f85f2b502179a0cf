"""Envelope models for the bridge's ``[{"success": ...}]`` / ``[{"error": ...}]`` arrays."""

from typing import Any, Optional

from pydantic import BaseModel


class ApiErrorEntry(BaseModel):
    type: int
    description: str
    address: Optional[str] = None


class UsernameSuccess(BaseModel):
    username: str


class LinkSuccess(BaseModel):
    success: UsernameSuccess


class DeleteSuccess(BaseModel):
    success: str


def find_error(body: Any) -> Optional[ApiErrorEntry]:
    """Return the first error entry of an error envelope, or None for a success body."""
    if not isinstance(body, list) or not body:
        return None
    first = body[0]
    if not isinstance(first, dict) or not isinstance(first.get("error"), dict):
        return None
    return ApiErrorEntry.model_validate(first["error"])
