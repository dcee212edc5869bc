"""
ORM models for the three tables: admins, users, reports.
"""

from safenetid.models.admin import Admin
from safenetid.models.user import User
from safenetid.models.report import Report

__all__ = ['Admin', 'User', 'Report']
