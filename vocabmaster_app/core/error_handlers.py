"""
Error Handlers for VocabMaster

Provides:
- Custom exception classes
- Consistent error response format
- Flask error handlers
"""

from typing import Any, Dict, Optional

from flask import current_app, jsonify, request
from flask_wtf.csrf import CSRFError
from sqlalchemy.exc import SQLAlchemyError

from ..db_instance import db


class VocabMasterError(Exception):
    """Base exception class for VocabMaster."""

    def __init__(
        self,
        message: str,
        code: str = 'UNKNOWN_ERROR',
        status_code: int = 500,
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> dict:
        """Convert error to dictionary for JSON response."""
        return {
            'success': False,
            'message': self.message,
            'code': self.code,
            'details': self.details
        }


class NotFoundError(VocabMasterError):
    """Resource not found."""

    def __init__(self, message: str = 'Resource not found', resource: str = None):
        super().__init__(
            message=message,
            code='NOT_FOUND',
            status_code=404,
            details={'resource': resource} if resource else None
        )


class ValidationError(VocabMasterError):
    """Input validation failed."""

    def __init__(self, message: str = 'Validation failed', errors: Any = None):
        super().__init__(
            message=message,
            code='VALIDATION_ERROR',
            status_code=400,
            details={'errors': errors} if errors else None
        )


class StructuralParseError(VocabMasterError):
    """A whole import batch could not be parsed."""

    def __init__(self, message: str = 'Invalid format'):
        super().__init__(message=message, code='INVALID_FORMAT', status_code=400)


class InsufficientDataError(VocabMasterError):
    """The word set is too small to start a study session."""

    def __init__(self, mode: str, required: int, available: int):
        super().__init__(
            message=f'Not enough words for {mode} mode: need at least {required}, found {available}',
            code='INSUFFICIENT_DATA',
            status_code=422,
            details={'mode': mode, 'required': required, 'available': available}
        )


class InvalidActionError(VocabMasterError):
    """A study action is not allowed in the current session state."""

    def __init__(self, message: str = 'Action not allowed in the current state', action: str = None):
        super().__init__(
            message=message,
            code='INVALID_ACTION',
            status_code=409,
            details={'action': action} if action else None
        )


class UnauthorizedError(VocabMasterError):
    """Caller identity missing or session expired."""

    def __init__(self, message: str = 'Unauthorized'):
        super().__init__(message=message, code='UNAUTHORIZED', status_code=401)


class StoreError(VocabMasterError):
    """Reading from or writing to the database failed."""

    def __init__(self, message: str = 'Database operation failed'):
        super().__init__(message=message, code='STORE_ERROR', status_code=500)


def error_response(
    message: str,
    code: str = 'ERROR',
    status_code: int = 400,
    details: Dict = None
) -> tuple:
    """Create a standardized error response."""
    response = {
        'success': False,
        'message': message,
        'code': code
    }
    if details:
        response['details'] = details

    return jsonify(response), status_code


def register_error_handlers(app):
    """Register error handlers with Flask app."""

    @app.errorhandler(VocabMasterError)
    def handle_vocabmaster_error(error):
        if error.status_code >= 500:
            current_app.logger.error(f"{error.code}: {error.message}")
        else:
            current_app.logger.info(f"{error.code}: {error.message}")
        return jsonify(error.to_dict()), error.status_code

    @app.errorhandler(SQLAlchemyError)
    def handle_store_error(error):
        db.session.rollback()
        current_app.logger.exception('Database error')
        return jsonify(StoreError().to_dict()), 500

    @app.errorhandler(CSRFError)
    def handle_csrf_error(error):
        return error_response(error.description, 'CSRF_ERROR', 400)

    @app.errorhandler(404)
    def handle_not_found(error):
        if request.path.startswith('/api/'):
            return error_response('Endpoint not found', 'NOT_FOUND', 404)
        return error

    @app.errorhandler(405)
    def handle_method_not_allowed(error):
        if request.path.startswith('/api/'):
            return error_response('Method not allowed', 'METHOD_NOT_ALLOWED', 405)
        return error

    @app.errorhandler(413)
    def handle_too_large(error):
        if request.path.startswith('/api/'):
            return error_response('Upload too large', 'PAYLOAD_TOO_LARGE', 413)
        return error

    @app.errorhandler(500)
    def handle_internal_error(error):
        current_app.logger.exception('Internal server error')
        if request.path.startswith('/api/'):
            return error_response('Internal server error', 'SERVER_ERROR', 500)
        return error
