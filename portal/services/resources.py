"""
Embedded Resource Service

Reads files bundled in the package's ``static/`` directory.
"""

import logging
from flask import current_app
from werkzeug.utils import safe_join

logger = logging.getLogger(__name__)

RESOURCE_ROOT = 'static'


def load_resource(name):
    """Read ``static/<name>`` as bytes.

    Raises FileNotFoundError for paths escaping the resource root and
    OSError for anything that cannot be read (missing file, directory).
    """
    path = safe_join(RESOURCE_ROOT, name)
    if path is None:
        raise FileNotFoundError(name)
    with current_app.open_resource(path) as fh:
        return fh.read()


def load_page(name):
    """Best-effort read of a page; returns an empty body on failure."""
    try:
        return load_resource(name)
    except OSError as e:
        logger.warning('Could not read embedded page %s: %s', name, e)
        return b''
