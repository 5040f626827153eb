"""Blueprint registration for study sessions (quiz, flashcard, spelling)."""

from flask import Blueprint

study_bp = Blueprint('study', __name__)

from . import routes  # noqa: E402  # isort:skip
