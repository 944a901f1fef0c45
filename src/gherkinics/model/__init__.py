"""Core data models for Gherkinics."""

from .entities import UNLOCATED, LocationKey, ScannedUnitMetadata, Token

__all__ = [
    "LocationKey",
    "ScannedUnitMetadata",
    "Token",
    "UNLOCATED",
]
