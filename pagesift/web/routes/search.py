"""
Search API routes.
"""

import logging
from flask import Blueprint, request, jsonify, current_app

from pagesift.exceptions import InvalidRequestError

search_bp = Blueprint('search', __name__)
logger = logging.getLogger(__name__)


def _int_field(data, name, default):
    value = data.get(name)
    if value is None:
        return default
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidRequestError(f"{name} must be an integer")
    return value


@search_bp.route('', methods=['POST'])
def submit_search():
    """Run a search and record its results."""
    data = request.get_json(silent=True)
    if not data or 'websiteUrl' not in data or 'searchQuery' not in data:
        return jsonify({'success': False, 'error': 'websiteUrl and searchQuery are required'}), 400

    pagesift = current_app.config['PAGESIFT']
    config = current_app.config['PAGESIFT_CONFIG']

    try:
        search_request = pagesift.build_request(
            str(data['websiteUrl']).strip(),
            str(data['searchQuery']).strip(),
            max_results=_int_field(data, 'maxResults', config.default_max_results),
            max_tokens_per_chunk=_int_field(data, 'maxTokensPerChunk', config.default_max_tokens),
        )
    except InvalidRequestError as e:
        return jsonify({'success': False, 'error': str(e)}), 400

    database = pagesift.get_database()
    search_id = database.create_search(search_request.website_url, search_request.search_query)
    logger.info(f"Search {search_id} submitted for {search_request.website_url}")
    outcome = pagesift.get_service().process(search_id, search_request)

    if not outcome.success:
        return jsonify({
            'success': False,
            'searchId': search_id,
            'error': outcome.error_message,
        }), 500

    return jsonify({
        'success': True,
        'searchId': search_id,
        'resultsCount': outcome.results_count,
        'totalChunks': outcome.total_chunks,
        'processingTime': outcome.processing_time_ms,
    })


@search_bp.route('/<search_id>', methods=['GET'])
def get_search(search_id):
    """Get a search and its ranked chunks."""
    database = current_app.config['PAGESIFT'].get_database()
    search = database.get_search(search_id)
    if search is None:
        return jsonify({'error': f'Search not found: {search_id}'}), 404

    return jsonify(search)


@search_bp.route('/<search_id>', methods=['DELETE'])
def delete_search(search_id):
    """Delete a search and its results."""
    database = current_app.config['PAGESIFT'].get_database()
    if not database.delete_search(search_id):
        return jsonify({'error': f'Search not found: {search_id}'}), 404

    return jsonify({'deleted': search_id})


@search_bp.route('/history', methods=['GET'])
def search_history():
    """Get recent searches."""
    limit = request.args.get('limit', 10, type=int)
    database = current_app.config['PAGESIFT'].get_database()

    return jsonify({
        'history': database.get_recent_searches(limit),
    })


@search_bp.route('/stats', methods=['GET'])
def search_stats():
    """Get search statistics."""
    database = current_app.config['PAGESIFT'].get_database()
    return jsonify(database.get_search_stats())
