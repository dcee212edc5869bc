"""
Admin Model
"""

from datetime import datetime
from flask_login import UserMixin
from safenetid.extensions import db
from safenetid.roles import Role


class Admin(UserMixin, db.Model):
    """Administrator account, created at bootstrap or from the CLI"""
    __tablename__ = 'admins'
    __table_args__ = {'sqlite_autoincrement': True}

    id = db.Column(db.Integer, primary_key=True)
    username = db.Column(db.String(80), unique=True, nullable=False, index=True)
    password_hash = db.Column(db.String(255), nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    role = Role.ADMIN

    def get_id(self):
        return f'{self.role.value}:{self.id}'

    def __repr__(self):
        return f'<Admin {self.username}>'
