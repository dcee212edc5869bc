"""
Admin Blueprint

Admin login and report management. Admins log in against the admins table
and get an admin-role session; user sessions never pass the admin gate.
"""

from flask import Blueprint

admin_bp = Blueprint('admin', __name__)

from safenetid.admin import routes  # noqa: E402, F401
