"""
Credential Store

Persistence of user and admin accounts. Unique violations come back as
DuplicateError so the API can answer 400 instead of a generic fault.
"""

import logging
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from safenetid.errors import DuplicateError, StorageError
from safenetid.extensions import db
from safenetid.models import Admin, User
from safenetid.services.passwords import hash_password

logger = logging.getLogger(__name__)


def _insert(row, duplicate_message):
    try:
        db.session.add(row)
        db.session.commit()
    except IntegrityError as e:
        db.session.rollback()
        logger.info('Rejected duplicate %r: %s', row, e.orig)
        raise DuplicateError(duplicate_message) from e
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.exception('Could not insert %r', row)
        raise StorageError(str(e)) from e
    return row.id


def _lookup(query):
    try:
        return query.first()
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.exception('Credential lookup failed')
        raise StorageError(str(e)) from e


def create_user(name, email, password_hash):
    """Insert a user and return its id."""
    user = User(name=name, email=email, password_hash=password_hash)
    return _insert(user, f'Email already registered: {email}')


def find_user_by_email(email):
    if not email:
        return None
    return _lookup(User.query.filter_by(email=email))


def create_admin(username, password_hash):
    """Insert an admin and return its id. Used by bootstrap and the CLI only."""
    admin = Admin(username=username, password_hash=password_hash)
    return _insert(admin, f'Admin already exists: {username}')


def find_admin_by_username(username):
    if not username:
        return None
    return _lookup(Admin.query.filter_by(username=username))


def ensure_admin(username, password):
    """Create the bootstrap admin if it is missing.

    Returns the existing or newly created Admin, or None when no password
    was supplied by the operator.
    """
    admin = find_admin_by_username(username)
    if admin:
        return admin

    if not password:
        logger.warning('No admin "%s" and ADMIN_PASSWORD is not set; '
                       'skipping bootstrap. Use `flask create-admin`.', username)
        return None

    admin_id = create_admin(username, hash_password(password))
    logger.info('Created bootstrap admin "%s" (id=%s)', username, admin_id)
    return db.session.get(Admin, admin_id)
