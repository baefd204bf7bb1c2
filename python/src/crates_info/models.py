"""
crates-info Models

This module defines the request and registry data models used by the lookup tool.
"""

from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel, Field


class CrateField(str, Enum):
    """Single field that can be selected for output."""
    LATEST = "latest"
    STABLE = "stable"
    HOMEPAGE = "homepage"
    REPOSITORY = "repository"
    DOCUMENTATION = "documentation"


@dataclass(frozen=True)
class LookupRequest:
    """One lookup as read from the command line."""
    crate_id: str | None = None
    field: CrateField | None = None


class CrateInfo(BaseModel):
    """Metadata for a single crate as returned by the registry."""

    name: str
    description: str
    keywords: list[str] = Field(default_factory=list)
    max_stable_version: str
    max_version: str
    homepage: str | None = None
    repository: str | None = None
    documentation: str | None = None


class CrateResponse(BaseModel):
    """Top-level registry response, `crate` is missing when nothing matched."""

    crate: CrateInfo | None = None
