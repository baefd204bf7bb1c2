"""
crates-info

Command-line lookup tool for crate metadata published on crates.io.

Components:
- cli: argument interpreter and entry point
- client: crates.io registry client
- formatter: report and single-field rendering
- models: request and registry data models
"""

from .client import CratesClient, RegistryError, fetch_crate
from .models import CrateField, CrateInfo, CrateResponse, LookupRequest

__version__ = "1.0.0"

__all__ = [
    "CrateField",
    "CrateInfo",
    "CrateResponse",
    "CratesClient",
    "LookupRequest",
    "RegistryError",
    "fetch_crate",
]
