"""
Operator commands, run through ``flask --app app <command>``.
"""

import click
from flask import current_app
from flask.cli import with_appcontext
from safenetid.errors import DuplicateError
from safenetid.extensions import db
from safenetid.services import create_admin, ensure_admin, hash_password


@click.command('create-admin')
@click.argument('username')
@click.password_option()
@with_appcontext
def create_admin_command(username, password):
    """Create an admin account."""
    try:
        admin_id = create_admin(username, hash_password(password))
    except DuplicateError as e:
        raise click.ClickException(e.message)
    click.echo(f'Created admin "{username}" (id={admin_id})')


@click.command('init-db')
@with_appcontext
def init_db_command():
    """Create tables and the bootstrap admin."""
    db.create_all()
    admin = ensure_admin(current_app.config['ADMIN_USERNAME'],
                         current_app.config.get('ADMIN_PASSWORD'))
    click.echo('Database initialized.')
    if admin is None:
        click.echo('No admin created: set ADMIN_PASSWORD or run `flask create-admin`.')


def register_commands(app):
    app.cli.add_command(create_admin_command)
    app.cli.add_command(init_db_command)
