"""
Admin Blueprint

Access is gated by the server-side session referenced by the session cookie.
"""

from flask import Blueprint

admin_bp = Blueprint('admin', __name__)

from portal.admin import routes  # noqa: E402, F401
