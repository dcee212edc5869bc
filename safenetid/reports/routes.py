"""
Report Routes

User-facing report submission and listing.
"""

from flask import jsonify, render_template
from flask_login import current_user
from safenetid.auth.decorators import user_required
from safenetid.reports import reports_bp
from safenetid.services import create_report, list_by_user
from safenetid.utils import request_data, field


@reports_bp.route('/')
def index():
    return render_template('index.html')


@reports_bp.route('/dashboard.html')
@user_required
def dashboard():
    return render_template('dashboard.html', user=current_user)


@reports_bp.route('/api/report', methods=['POST'])
@user_required
def submit_report():
    data = request_data()
    report_id = create_report(current_user.id, field(data, 'site'), field(data, 'note'))
    return jsonify(success=True, id=report_id)


@reports_bp.route('/api/my-reports')
@user_required
def my_reports():
    """Current user's reports, newest first"""
    return jsonify([r.to_dict() for r in list_by_user(current_user.id)])
