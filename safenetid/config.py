"""
Settings, read from the environment (and a `.env` file when present).
"""
import os
from datetime import timedelta

from dotenv import load_dotenv

load_dotenv()


class Config:
    """Production defaults; override through environment variables."""

    # Required by Flask even with server-side sessions
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'dev-secret'

    # SQLite file under instance/ unless DATABASE_URL is set
    basedir = os.path.abspath(os.path.dirname(os.path.dirname(__file__)))
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or \
        'sqlite:///' + os.path.join(basedir, 'instance', 'safenetid.db')
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Server-side sessions; only the token travels in the cookie
    SESSION_STORE = os.environ.get('SESSION_STORE') or 'memory'
    SESSION_COOKIE_NAME = 'safenetid_session'
    SESSION_COOKIE_HTTPONLY = True
    PERMANENT_SESSION_LIFETIME = timedelta(
        minutes=int(os.environ.get('SESSION_LIFETIME_MINUTES') or 120))

    PASSWORD_HASH_METHOD = os.environ.get('PASSWORD_HASH_METHOD') or 'pbkdf2:sha256'

    # Bootstrap admin. There is no default password: without one the
    # bootstrap is skipped and `flask create-admin` must be used.
    ADMIN_USERNAME = os.environ.get('ADMIN_USERNAME') or 'admin'
    ADMIN_PASSWORD = os.environ.get('ADMIN_PASSWORD')

    LOG_LEVEL = os.environ.get('LOG_LEVEL') or 'INFO'


class TestConfig(Config):
    """In-memory database, fast hashing and a known admin for the test suite."""
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    PASSWORD_HASH_METHOD = 'pbkdf2:sha256:1000'
    ADMIN_USERNAME = 'admin'
    ADMIN_PASSWORD = 'test-admin-pass'
    LOG_LEVEL = 'WARNING'
