"""
Deployment-specific configurations and middleware
"""
import os
from flask import jsonify, make_response

def configure_deployment(app):
    """Apply deployment-specific configurations to Flask app"""

    # Force JSON responses for all errors in deployment
    if os.environ.get('DEPLOYMENT') == 'true':

        @app.errorhandler(404)
        def not_found_error(error):
            return make_response(jsonify({
                'success': False,
                'error': 'Resource not found'
            }), 404)

        @app.errorhandler(405)
        def method_not_allowed(error):
            return make_response(jsonify({
                'success': False,
                'error': 'Method not allowed for this endpoint'
            }), 405)

        @app.errorhandler(500)
        def internal_error(error):
            return make_response(jsonify({
                'success': False,
                'error': 'Internal error while building the leaderboard'
            }), 500)

        @app.errorhandler(503)
        def service_unavailable(error):
            return make_response(jsonify({
                'success': False,
                'error': 'Service temporarily unavailable. Try again.'
            }), 503)

        # Middleware to ensure JSON responses
        @app.after_request
        def ensure_json_response(response):
            # Only modify error responses
            if response.status_code >= 400:
                # Check if response is already JSON
                if not response.content_type.startswith('application/json'):
                    # Convert HTML error to JSON
                    response = make_response(jsonify({
                        'success': False,
                        'error': f'Error {response.status_code}: request could not be processed',
                        'status': response.status_code
                    }), response.status_code)
                    response.headers['Content-Type'] = 'application/json'
            return response
