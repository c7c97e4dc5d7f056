"""
Pages Blueprint

Index page and embedded static assets.
"""

from flask import Blueprint

pages_bp = Blueprint('pages', __name__)

from portal.pages import routes  # noqa: E402, F401
