"""Schemas used by the registration endpoint."""

from __future__ import annotations

from pydantic import BaseModel, Field


class RegistrationPayload(BaseModel):
    """Credentials read from a registration body that passed validation.

    Nothing is persisted; the password is never logged.
    """

    username: str = Field(..., description="Display name used in the welcome text")
    password: str = Field(..., repr=False)
