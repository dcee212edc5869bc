"""
Password hashing.

Thin wrapper over werkzeug's salted PBKDF2 hashes. The hash method comes
from ``PASSWORD_HASH_METHOD`` so tests can use a cheap iteration count.
"""

from flask import current_app
from werkzeug.security import generate_password_hash, check_password_hash


def hash_password(plaintext):
    method = current_app.config.get('PASSWORD_HASH_METHOD', 'pbkdf2:sha256')
    return generate_password_hash(plaintext, method=method)


def verify_password(plaintext, password_hash):
    if not isinstance(plaintext, str) or not plaintext or not password_hash:
        return False
    return check_password_hash(password_hash, plaintext)
