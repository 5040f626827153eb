from flask import current_app
from sqlalchemy.exc import SQLAlchemyError

from ...core.signals import quiz_result_saved
from ...db_instance import db
from .services import ProgressService


def on_quiz_result_saved(sender, result, **kwargs):
    """
    Event listener: roll a newly saved result into the collection's progress.
    """
    try:
        ProgressService.rollup(result)
    except SQLAlchemyError:
        db.session.rollback()
        current_app.logger.error(f"Progress rollup failed for result {result.id}")
        raise


def register_events():
    """Connect signals."""
    quiz_result_saved.connect(on_quiz_result_saved)
