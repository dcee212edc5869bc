"""
Admin Routes

Admin authentication and report management.
"""

import logging
from flask import jsonify, render_template
from flask_login import current_user
from safenetid.admin import admin_bp
from safenetid.auth.decorators import admin_required
from safenetid.services import (
    find_admin_by_username, verify_password, list_all, update_status, delete_report
)
from safenetid.sessions import begin_login, end_login
from safenetid.utils import request_data, field

logger = logging.getLogger(__name__)


@admin_bp.route('/api/admin/login', methods=['POST'])
def admin_login():
    """Check credentials against the admins table and start an admin session."""
    data = request_data()
    username = field(data, 'username')
    password = field(data, 'password', strip=False)

    admin = find_admin_by_username(username)
    if admin is None:
        logger.info('Admin login failed for %s: no such admin', username)
        return jsonify(success=False, message='Admin not found')

    if not verify_password(password, admin.password_hash):
        logger.info('Admin login failed for %s: wrong password', username)
        return jsonify(success=False, message='Wrong password')

    begin_login(admin)
    return jsonify(success=True)


@admin_bp.route('/api/admin/logout', methods=['POST'])
def admin_logout():
    """Drop the session whatever it holds."""
    end_login()
    return jsonify(success=True)


@admin_bp.route('/api/admin/reports')
@admin_required
def all_reports():
    """Every report with its reporter's name (None if the user is gone)."""
    return jsonify([
        dict(report.to_dict(), reporter=reporter)
        for report, reporter in list_all()
    ])


@admin_bp.route('/api/admin/reports/<report_id>/status', methods=['POST'])
@admin_required
def set_report_status(report_id):
    data = request_data()
    update_status(report_id, field(data, 'status'))
    logger.info('Admin %s changed status of report %s', current_user.username, report_id)
    return jsonify(success=True)


@admin_bp.route('/api/admin/reports/<report_id>', methods=['DELETE'])
@admin_required
def remove_report(report_id):
    delete_report(report_id)
    logger.info('Admin %s deleted report %s', current_user.username, report_id)
    return jsonify(success=True)


@admin_bp.route('/admin/login.html')
def login_page():
    return render_template('admin/login.html')


@admin_bp.route('/admin/dashboard.html')
@admin_required
def admin_dashboard():
    return render_template('admin/dashboard.html', admin=current_user)
