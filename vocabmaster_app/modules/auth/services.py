"""User persistence for the authentication boundary."""

from __future__ import annotations

import logging
from typing import Optional

from ...db_instance import db
from ...models import User

logger = logging.getLogger(__name__)


class AuthService:
    @staticmethod
    def upsert_user(
        email: str,
        first_name: Optional[str] = None,
        last_name: Optional[str] = None,
        profile_image_url: Optional[str] = None,
    ) -> User:
        """Create the user on first sign-in, refresh the profile claims afterwards."""
        user = User.query.filter_by(email=email).first()
        if user is None:
            user = User(email=email)
            db.session.add(user)
            logger.info("Creating user for %s", email)

        user.first_name = first_name if first_name is not None else (user.first_name or '')
        user.last_name = last_name if last_name is not None else (user.last_name or '')
        if profile_image_url is not None:
            user.profile_image_url = profile_image_url

        db.session.commit()
        return user

    @staticmethod
    def update_profile(user: User, first_name: Optional[str], last_name: Optional[str]) -> User:
        if first_name is not None:
            user.first_name = first_name
        if last_name is not None:
            user.last_name = last_name
        db.session.commit()
        return user
