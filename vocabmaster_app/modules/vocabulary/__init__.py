"""Blueprint registration for vocabulary entries and bulk import."""

from flask import Blueprint

vocabulary_bp = Blueprint('vocabulary', __name__)

from . import routes  # noqa: E402  # isort:skip
