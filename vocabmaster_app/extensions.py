"""Application-wide extensions.

This module centralizes extension instances so they can be imported without
causing circular dependencies.
"""

from flask_login import LoginManager
from flask_wtf import CSRFProtect

from .db_instance import db

login_manager = LoginManager()
login_manager.session_protection = "basic"

csrf_protect = CSRFProtect()

__all__ = ["db", "login_manager", "csrf_protect"]
