"""Pydantic models for spaces."""

from pydantic import BaseModel, Field


class Space(BaseModel):
    """A tenant space and the applications built in it."""

    applications: list[str] = Field(
        default_factory=list, description="Application names, one per build config"
    )
