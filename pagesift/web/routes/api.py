"""
General API routes.
"""

from flask import Blueprint, jsonify, current_app
from pagesift import __version__

api_bp = Blueprint('api', __name__)


@api_bp.route('/health', methods=['GET'])
def health():
    """Health check endpoint."""
    return jsonify({
        'status': 'healthy',
        'version': __version__,
    })


@api_bp.route('/config', methods=['GET'])
def get_config():
    """Get current configuration."""
    config = current_app.config['PAGESIFT_CONFIG']
    return jsonify(config.to_dict())
