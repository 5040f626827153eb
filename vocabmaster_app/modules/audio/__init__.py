"""Blueprint registration for pronunciation audio."""

from flask import Blueprint

audio_bp = Blueprint('audio', __name__)

from . import routes  # noqa: E402  # isort:skip
