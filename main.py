import os
import logging
from datetime import datetime
from flask import Flask, jsonify

from mvp_leaderboard import config
from mvp_leaderboard.dashboard import bp_leaderboard, leaderboard_bp
from mvp_leaderboard.dashboard.api import get_service
from deployment_config import configure_deployment

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if os.environ.get('DEBUG', '').lower() == 'true' else logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)

app = Flask(__name__)
app.secret_key = config.SECRET_KEY

# Register leaderboard API blueprint
app.register_blueprint(bp_leaderboard)

# Register leaderboard page blueprint
app.register_blueprint(leaderboard_bp)

# JSON error responses in deployment
configure_deployment(app)

@app.route('/health', methods=['GET'])
def health_check():
    """
    Health check endpoint for monitoring and load balancers

    Returns:
        - 200 OK: Leaderboard data loads
        - 503 Service Unavailable: Data or config cannot be read
    """
    health_status = {
        'status': 'healthy',
        'timestamp': datetime.now().isoformat(),
        'service': 'mvp-leaderboard',
        'environment': 'DEPLOYMENT' if os.environ.get('DEPLOYMENT') else 'LOCAL',
        'checks': {}
    }

    for name, path in (('players', config.PLAYERS_PATH),
                       ('events', config.EVENTS_PATH),
                       ('score_config', config.SCORE_CONFIG_PATH)):
        if os.path.exists(path):
            health_status['checks'][name] = 'present'
        else:
            health_status['checks'][name] = f'missing: {path}'
            health_status['status'] = 'unhealthy'

    snap = get_service().snapshot()
    if snap.error:
        health_status['checks']['leaderboard'] = f'error: {snap.error}'
        health_status['status'] = 'unhealthy'
    else:
        health_status['checks']['leaderboard'] = f'{len(snap.entries)} players'

    status_code = 200 if health_status['status'] == 'healthy' else 503
    return jsonify(health_status), status_code


if __name__ == '__main__':
    app.run(host='0.0.0.0', port=5000, debug=True)
