"""Blueprint registration for dashboard statistics."""

from flask import Blueprint

dashboard_bp = Blueprint('dashboard', __name__)

from . import routes  # noqa: E402  # isort:skip
