"""
Report Model
"""

from datetime import datetime
from safenetid.extensions import db

DEFAULT_STATUS = 'Pending'


class Report(db.Model):
    """A site reported by a user, tracked through an admin-managed status"""
    __tablename__ = 'reports'
    __table_args__ = {'sqlite_autoincrement': True}

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey('users.id', ondelete='SET NULL'),
                        nullable=True, index=True)
    site = db.Column(db.Text, nullable=False)
    note = db.Column(db.Text)
    status = db.Column(db.String(64), nullable=False, default=DEFAULT_STATUS)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, index=True)

    def to_dict(self):
        return {
            'id': self.id,
            'user_id': self.user_id,
            'site': self.site,
            'note': self.note,
            'status': self.status,
            'created_at': self.created_at.isoformat() if self.created_at else None,
        }

    def __repr__(self):
        return f'<Report {self.id} {self.site} [{self.status}]>'
