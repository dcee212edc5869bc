"""
Shared extension objects, bound to an app in `create_app`.

There is a single LoginManager for both account tables. What tells a user
apart from an admin is the id it writes into the session, ``user:<id>`` or
``admin:<id>``; `auth.decorators` reads the role back off the loaded object.
"""

from flask_sqlalchemy import SQLAlchemy
from flask_login import LoginManager

db = SQLAlchemy()

login_manager = LoginManager()
