"""
Auth Routes

User registration and session login/logout.
"""

import logging
from flask import jsonify, render_template
from safenetid.auth import auth_bp
from safenetid.errors import ValidationError
from safenetid.services import create_user, find_user_by_email, hash_password, verify_password
from safenetid.sessions import begin_login, end_login
from safenetid.utils import request_data, field

logger = logging.getLogger(__name__)


@auth_bp.route('/api/register', methods=['POST'])
def register():
    """Create a user account"""
    data = request_data()
    name = field(data, 'name')
    email = field(data, 'email')
    password = field(data, 'password', strip=False)

    if not name or not email or not password:
        raise ValidationError('name, email and password are required')

    user_id = create_user(name, email, hash_password(password))
    logger.info('Registered user %s (id=%s)', email, user_id)
    return jsonify(success=True, id=user_id)


@auth_bp.route('/api/login', methods=['POST'])
def login():
    """User login; starts a user-role session on success"""
    data = request_data()
    email = field(data, 'email')
    password = field(data, 'password', strip=False)

    user = find_user_by_email(email)
    if user is None:
        logger.info('Login failed for %s: no such user', email)
        return jsonify(success=False, message='User not found')

    if not verify_password(password, user.password_hash):
        logger.info('Login failed for %s: wrong password', email)
        return jsonify(success=False, message='Wrong password')

    begin_login(user)
    return jsonify(success=True)


@auth_bp.route('/api/logout', methods=['POST'])
def logout():
    end_login()
    return jsonify(success=True)


@auth_bp.route('/login.html')
def login_page():
    return render_template('login.html')


@auth_bp.route('/register.html')
def register_page():
    return render_template('register.html')
