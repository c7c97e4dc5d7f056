"""
Models Package

Exports all models for easy importing.
"""

from portal.models.session import SessionRecord

__all__ = ['SessionRecord']
