"""
Credential Check

Compares submitted credentials against the fixed admin constants.
"""

from portal.config import Config


def check_credentials(username, password):
    """Return True iff both values equal the configured admin credentials"""
    return username == Config.ADMIN_USERNAME and password == Config.ADMIN_PASSWORD
