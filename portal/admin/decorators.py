"""
Admin Decorator
"""

from functools import wraps
from flask import current_app, g, redirect, request, url_for
from portal.extensions import session_store


def session_required(f):
    """Decorator to ensure the request carries a live session cookie.

    - Missing cookie: redirect to the login page
    - Unknown, invalidated or expired token: redirect to the login page
    - Otherwise the record is available as ``g.session_record``
    """
    @wraps(f)
    def wrapper(*args, **kwargs):
        token = request.cookies.get(current_app.config['SESSION_ID_COOKIE'])
        if token is None:
            return redirect(url_for('auth.login'))
        record, found = session_store.get(token)
        if not found:
            return redirect(url_for('auth.login'))
        g.session_record = record
        return f(*args, **kwargs)
    return wrapper
