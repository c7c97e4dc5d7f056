"""
Configuration settings for the admin portal
"""
import logging
from datetime import timedelta


class Config:
    """Flask application configuration"""

    # Fixed listening port
    PORT = 8080

    LOG_LEVEL = logging.INFO

    # Admin Credentials (fixed, never read from the environment)
    ADMIN_USERNAME = 'admin'
    ADMIN_PASSWORD = 'password'

    # Session cookie and lifetimes
    SESSION_ID_COOKIE = 'session_id'
    SESSION_LIFETIME = timedelta(hours=1)
    # Computed separately from the server-side record expiry
    SESSION_COOKIE_LIFETIME = timedelta(hours=1)


class TestConfig(Config):
    """Testing configuration"""
    TESTING = True
    LOG_LEVEL = logging.DEBUG
