"""
Auth Blueprint

User registration, login and logout.
"""

from flask import Blueprint

auth_bp = Blueprint('auth', __name__)

from safenetid.auth import routes  # noqa: E402, F401
