"""
Session roles.
"""

import enum


class Role(enum.Enum):
    USER = 'user'
    ADMIN = 'admin'
