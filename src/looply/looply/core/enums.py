from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """User roles used for access control."""

    EMPLOYER = "employer"
    EMPLOYEE = "employee"


class ReportStatus(str, Enum):
    """Lifecycle of an end-of-day report. Submission is one-way."""

    DRAFT = "draft"
    SUBMITTED = "submitted"
