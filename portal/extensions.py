"""
Flask Extensions

The session store is process-wide: exactly one instance, shared by every
request thread and bound to the app in create_app().
"""

from portal.services.sessions import SessionStore

# Session store for admin page access
session_store = SessionStore()
