from flask import current_app, jsonify
from flask_login import current_user, login_required

from . import dashboard_bp
from .services import DashboardService


@dashboard_bp.route('/dashboard/stats', methods=['GET'])
@login_required
def dashboard_stats():
    stats = DashboardService.get_stats(
        current_user.id,
        recent_limit=current_app.config.get('DASHBOARD_RECENT_LIMIT', 5),
    )
    return jsonify(stats)
