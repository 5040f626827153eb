"""Sign-in boundary. Everything else only sees ``current_user.id``."""

from __future__ import annotations

from flask import current_app, jsonify, request
from flask_login import current_user, login_required, login_user, logout_user
from flask_wtf.csrf import generate_csrf

from ...core.error_handlers import NotFoundError
from ...core.validation import validate_payload
from . import auth_bp
from .schemas import LoginRequest, ProfileUpdateRequest
from .services import AuthService


@auth_bp.route('/auth/csrf-token', methods=['GET'])
def csrf_token():
    return jsonify({'csrfToken': generate_csrf()})


@auth_bp.route('/login', methods=['POST'])
def login():
    """Development sign-in standing in for the external identity provider."""
    if not current_app.config.get('ALLOW_DEV_LOGIN', False):
        raise NotFoundError('Endpoint not found')

    payload = validate_payload(LoginRequest, request.get_json(silent=True))
    user = AuthService.upsert_user(
        payload.email,
        first_name=payload.first_name,
        last_name=payload.last_name,
        profile_image_url=payload.profile_image_url,
    )
    login_user(user, remember=True)
    current_app.logger.info("User %s signed in", user.id)
    return jsonify(user.to_dict())


@auth_bp.route('/logout', methods=['POST'])
def logout():
    logout_user()
    return '', 204


@auth_bp.route('/auth/user', methods=['GET'])
@login_required
def get_current_user():
    return jsonify(current_user.to_dict())


@auth_bp.route('/profile', methods=['PATCH'])
@login_required
def update_profile():
    payload = validate_payload(ProfileUpdateRequest, request.get_json(silent=True))
    user = AuthService.update_profile(current_user, payload.first_name, payload.last_name)
    return jsonify(user.to_dict())
