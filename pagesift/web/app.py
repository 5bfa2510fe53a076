"""
Flask application for the PageSift HTTP API.
"""

import os
from flask import Flask, jsonify

from pagesift import PageSift
from pagesift.config.settings import Config
from pagesift.utils.logging import setup_logging
from .routes import search_bp, api_bp


def create_app(data_dir=None, debug=False, session=None):
    """Create Flask application."""
    app = Flask(__name__)
    app.config['SECRET_KEY'] = os.environ.get('SECRET_KEY', 'dev-key-change-in-production')
    app.config['DEBUG'] = debug

    # One config and HTTP session for the whole process
    config = Config(data_dir=data_dir)
    app.config['PAGESIFT_CONFIG'] = config
    app.config['PAGESIFT'] = PageSift(config=config, session=session)

    log_level = "DEBUG" if debug else config.log_level
    setup_logging(log_level=log_level)

    app.register_blueprint(search_bp, url_prefix='/api/search')
    app.register_blueprint(api_bp, url_prefix='/api')

    @app.errorhandler(404)
    def not_found(error):
        """404 error handler."""
        return jsonify({'error': 'Not found'}), 404

    @app.errorhandler(405)
    def method_not_allowed(error):
        """405 error handler."""
        return jsonify({'error': 'Method not allowed'}), 405

    @app.errorhandler(500)
    def internal_error(error):
        """500 error handler."""
        return jsonify({'error': 'Internal server error'}), 500

    return app


if __name__ == '__main__':
    app = create_app(debug=True)
    app.run(host='0.0.0.0', port=5000)
