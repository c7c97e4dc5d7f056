"""
Admin Portal
Application Entry Point

This file serves as the entry point for the Flask application.
It uses the application factory pattern defined in the portal package.
"""

import logging
import sys

from portal import create_app
from portal.config import Config

# Create the Flask application using the factory
app = create_app()

if __name__ == '__main__':
    logging.basicConfig(level=Config.LOG_LEVEL)
    print(f"Starting server at http://localhost:{Config.PORT}")
    try:
        app.run(host='0.0.0.0', port=Config.PORT, threaded=True)
    except OSError as e:
        print(f"Error starting server: {e}")
        sys.exit(1)
