"""
Admin Routes
"""

import logging
from flask import Response, g, render_template
from jinja2 import TemplateError
from portal.admin import admin_bp
from portal.admin.decorators import session_required
from portal.pages.routes import ALL_METHODS

logger = logging.getLogger(__name__)


@admin_bp.route('', methods=ALL_METHODS)
@session_required
def admin_page():
    """Admin page rendered with the caller's session record.

    Template failures leave an empty page rather than an error status.
    """
    try:
        return render_template('admin.html', record=g.session_record)
    except TemplateError:
        logger.exception('Could not render admin template')
        return Response(b'', content_type='text/html')
