"""Schemas describing the public configuration of the instance."""

from pydantic import BaseModel, ConfigDict


class PublicConfigRead(BaseModel):
    disable_registration: bool
    is_demo_mode: bool
    has_smtp: bool
    has_github_sign_in: bool
    has_google_sign_in: bool

    model_config = ConfigDict(from_attributes=True)


class HealthRead(BaseModel):
    status: str


__all__ = ["HealthRead", "PublicConfigRead"]
