"""
SafeNetID

`create_app` wires the report portal together: config, the server-side
session store, the database, the user/admin blueprints and the operator
commands. Tables and the bootstrap admin are created on startup.
"""

import logging
import os
from flask import Flask
from sqlalchemy import event
from safenetid.extensions import db, login_manager
from safenetid.config import Config
from safenetid.sessions import ServerSideSessionInterface, create_session_store

logger = logging.getLogger(__name__)


def create_app(config_class=Config):
    """Build a SafeNetID app.

    Args:
        config_class: settings object, `Config` or a subclass such as `TestConfig`

    Returns:
        The Flask app, with tables created and the bootstrap admin ensured
    """
    app = Flask(__name__)
    app.config.from_object(config_class)

    logging.basicConfig(format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')
    logging.getLogger('safenetid').setLevel(app.config['LOG_LEVEL'])

    # Sessions are held server-side; the store belongs to this app
    app.session_interface = ServerSideSessionInterface(
        create_session_store(app.config['SESSION_STORE']))

    # Initialize extensions
    db.init_app(app)
    login_manager.init_app(app)

    # Register blueprints
    from safenetid.auth import auth_bp
    from safenetid.admin import admin_bp
    from safenetid.reports import reports_bp

    app.register_blueprint(auth_bp)
    app.register_blueprint(admin_bp)
    app.register_blueprint(reports_bp)

    from safenetid.errors import register_error_handlers
    from safenetid.commands import register_commands
    register_error_handlers(app)
    register_commands(app)

    # Login ids are role-qualified: "user:<id>" or "admin:<id>"
    @login_manager.user_loader
    def load_identity(login_id):
        from safenetid.models import Admin, User
        from safenetid.roles import Role

        role_value, _, raw_id = login_id.partition(':')
        try:
            role = Role(role_value)
            pk = int(raw_id)
        except ValueError:
            return None
        model = {Role.USER: User, Role.ADMIN: Admin}[role]
        return db.session.get(model, pk)

    # Schema, FK enforcement, bootstrap admin
    with app.app_context():
        _ensure_instance_dir(app.config['SQLALCHEMY_DATABASE_URI'])
        if db.engine.dialect.name == 'sqlite':
            event.listen(db.engine, 'connect', _enable_sqlite_foreign_keys)
        db.create_all()
        logger.info('Database ready at %s', db.engine.url)
        _ensure_default_data(app)

    return app


def _ensure_instance_dir(uri):
    prefix = 'sqlite:///'
    if uri.startswith(prefix) and ':memory:' not in uri:
        os.makedirs(os.path.dirname(os.path.abspath(uri[len(prefix):])), exist_ok=True)


def _ensure_default_data(app):
    """Ensure the bootstrap admin exists when the operator supplied a password."""
    from safenetid.services import ensure_admin

    ensure_admin(app.config['ADMIN_USERNAME'], app.config.get('ADMIN_PASSWORD'))


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    # Off by default on every SQLite connection
    cursor = dbapi_connection.cursor()
    cursor.execute('PRAGMA foreign_keys=ON')
    cursor.close()
