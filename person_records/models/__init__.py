"""Data models for person_records."""

from .person import Person

__all__ = ["Person"]
