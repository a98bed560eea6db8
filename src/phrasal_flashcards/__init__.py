"""Phrasal-verb flashcard data parsing package."""

from .models import DatasetIssue, DatasetSummary, WordRecord

__all__ = ["WordRecord", "DatasetIssue", "DatasetSummary"]
