"""Shared types for the lazylet value system."""

from enum import Enum


SUBJECT = "subject"


class Status(Enum):
    """Example execution status."""

    IDLE = "idle"
    IN_PROGRESS = "in_progress"
    PASSED = "passed"
    FAILED = "failed"
    ERROR = "error"
