"""
Reports Blueprint

Report submission and the user dashboard.
"""

from flask import Blueprint

reports_bp = Blueprint('reports', __name__)

from safenetid.reports import routes  # noqa: E402, F401
