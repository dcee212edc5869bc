"""
Credential store, password hasher and report store.

Routes import from here rather than from the submodules.
"""

from safenetid.services.passwords import hash_password, verify_password
from safenetid.services.credentials import (
    create_user, find_user_by_email, create_admin, find_admin_by_username, ensure_admin
)
from safenetid.services.reports import (
    create_report, list_by_user, list_all, update_status, delete_report
)

__all__ = [
    'hash_password',
    'verify_password',
    'create_user',
    'find_user_by_email',
    'create_admin',
    'find_admin_by_username',
    'ensure_admin',
    'create_report',
    'list_by_user',
    'list_all',
    'update_status',
    'delete_report'
]
