"""Blueprint registration for vocabulary collections."""

from flask import Blueprint

collections_bp = Blueprint('collections', __name__)

from . import routes  # noqa: E402  # isort:skip
