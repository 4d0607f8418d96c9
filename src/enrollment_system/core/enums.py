from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """User role used for access control."""

    ADMIN = "admin"
    STUDENT = "student"


class EnrollmentState(str, Enum):
    """Lifecycle of an enrollment. SIGNED is terminal."""

    REGISTERED = "REGISTERED"
    SIGNED = "SIGNED"
