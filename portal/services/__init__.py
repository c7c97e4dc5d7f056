"""
Services Package

Exports all services for easy importing.
"""

from portal.services.sessions import SessionStore
from portal.services.credentials import check_credentials
from portal.services.resources import load_resource, load_page

__all__ = [
    'SessionStore',
    'check_credentials',
    'load_resource',
    'load_page'
]
