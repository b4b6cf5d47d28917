"""Submission validation package."""

from eco_helper.validation.validator import SubmissionValidator

__all__ = ["SubmissionValidator"]
