"""
Page Routes

Index page and generic static asset delivery from the embedded resource set.
"""

import logging
import mimetypes
from flask import Response, abort
from portal.pages import pages_bp
from portal.services import load_page, load_resource

logger = logging.getLogger(__name__)

# Methods accepted by pages that render regardless of method
ALL_METHODS = ['GET', 'HEAD', 'POST', 'PUT', 'PATCH', 'DELETE', 'OPTIONS']


@pages_bp.route('/', methods=ALL_METHODS)
def index():
    """Landing page"""
    return Response(load_page('index.html'), content_type='text/html')


@pages_bp.route('/static/<path:filename>', methods=ALL_METHODS)
def static_asset(filename):
    """Serve a file from the embedded set with a type guessed from its extension"""
    try:
        data = load_resource(filename)
    except OSError:
        logger.debug('Static asset not found: %s', filename)
        abort(404)

    mimetype, _ = mimetypes.guess_type(filename)
    return Response(data, mimetype=mimetype or 'application/octet-stream')
