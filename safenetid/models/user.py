"""
User Model
"""

from datetime import datetime
from flask_login import UserMixin
from safenetid.extensions import db
from safenetid.roles import Role


class User(UserMixin, db.Model):
    """Registered user; the only role allowed to file reports"""
    __tablename__ = 'users'
    # Deleted ids are never handed out again
    __table_args__ = {'sqlite_autoincrement': True}

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(120))
    email = db.Column(db.String(255), unique=True, nullable=False, index=True)
    password_hash = db.Column(db.String(255), nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    reports = db.relationship('Report', backref='user', lazy=True,
                              passive_deletes=True)

    role = Role.USER

    def get_id(self):
        return f'{self.role.value}:{self.id}'

    def __repr__(self):
        return f'<User {self.email}>'
