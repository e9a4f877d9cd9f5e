"""Pydantic schema definitions for submitted applications."""

from __future__ import annotations

from .application import (
    ApplicationForm,
    HouseholdMember,
    UploadedFile,
    assemble_household_members,
    parse_amount,
    parse_flag,
)

__all__ = [
    "ApplicationForm",
    "HouseholdMember",
    "UploadedFile",
    "assemble_household_members",
    "parse_amount",
    "parse_flag",
]
