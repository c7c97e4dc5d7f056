"""
Auth Routes

Login against the fixed admin credentials. A successful login opens a
server-side session and hands its token to the browser in a cookie.
"""

import logging
from datetime import datetime, timezone
from flask import Response, current_app, redirect, request, url_for
from portal.auth import auth_bp
from portal.extensions import session_store
from portal.pages.routes import ALL_METHODS
from portal.services import check_credentials, load_page

logger = logging.getLogger(__name__)


@auth_bp.route('/login', methods=ALL_METHODS)
def login():
    """Login page (any non-POST) and credential submission (POST)"""
    if request.method != 'POST':
        return Response(load_page('login.html'), content_type='text/html')

    username = request.form.get('username', '')
    password = request.form.get('password', '')

    if check_credentials(username, password):
        token = session_store.create(username)
        response = redirect(url_for('admin.admin_page'))
        response.set_cookie(
            current_app.config['SESSION_ID_COOKIE'],
            token,
            expires=datetime.now(timezone.utc) + current_app.config['SESSION_COOKIE_LIFETIME'],
        )
        return response

    logger.info('Rejected login attempt for %r', username)
    # Location header with a 401 status, as clients have always received it
    return redirect(url_for('auth.login'), code=401)
