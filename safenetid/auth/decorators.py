"""
Route Gate

Every protected view declares the single Role it accepts. Page routes
redirect to that role's login page; API routes answer 401 JSON.
"""

from functools import wraps
from flask import jsonify, redirect, request, url_for
from flask_login import current_user
from safenetid.roles import Role

LOGIN_PAGES = {
    Role.USER: 'auth.login_page',
    Role.ADMIN: 'admin.login_page',
}


def role_required(role):
    """Decorator to ensure the request comes from a session of `role`.

    A user session never passes an admin gate and vice versa.
    """
    login_endpoint = LOGIN_PAGES[role]

    def decorator(f):
        @wraps(f)
        def wrapper(*args, **kwargs):
            if current_user.is_authenticated and current_user.role is role:
                return f(*args, **kwargs)
            if request.path.startswith('/api/'):
                return jsonify(success=False, error='Unauthorized'), 401
            return redirect(url_for(login_endpoint))
        return wrapper
    return decorator


user_required = role_required(Role.USER)
admin_required = role_required(Role.ADMIN)
