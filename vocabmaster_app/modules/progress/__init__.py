"""Quiz results and per-collection progress counters."""

from flask import Blueprint

progress_bp = Blueprint('progress', __name__)

from . import routes  # noqa: E402  # isort:skip
from .events import register_events  # noqa: E402  # isort:skip


def setup_module(app):
    """Connect the progress rollup to ``quiz_result_saved``."""
    register_events()
    app.logger.debug("Progress module initialised.")
