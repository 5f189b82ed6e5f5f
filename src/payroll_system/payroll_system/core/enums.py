from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Role carried in issued tokens."""

    ADMIN = "admin"


class Gender(str, Enum):
    MALE = "Male"
    FEMALE = "Female"
