"""
Report Store

Insert, list, status update and delete for reports.
"""

import logging
from sqlalchemy.exc import SQLAlchemyError
from safenetid.errors import NotFoundError, StorageError, ValidationError
from safenetid.extensions import db
from safenetid.models import Report, User
from safenetid.models.report import DEFAULT_STATUS

logger = logging.getLogger(__name__)


def _commit():
    try:
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.exception('Report store commit failed')
        raise StorageError(str(e)) from e


def _report_key(report_id):
    """Report ids arrive from the URL as text; anything non-numeric matches no row."""
    try:
        key = int(report_id)
    except (TypeError, ValueError):
        return None
    # SQLite integers are signed 64-bit
    return key if -2 ** 63 <= key < 2 ** 63 else None


def create_report(user_id, site, note=None):
    """Store a new report for `user_id` and return its id."""
    if not site:
        raise ValidationError('site required')

    report = Report(user_id=user_id, site=site, note=note or None)
    db.session.add(report)
    _commit()
    logger.info('User %s reported %s (report %s)', user_id, site, report.id)
    return report.id


def list_by_user(user_id):
    """Reports owned by `user_id`, newest first."""
    return Report.query.filter_by(user_id=user_id)\
        .order_by(Report.created_at.desc(), Report.id.desc()).all()


def list_all():
    """All reports with the reporter's name, newest first.

    Reports whose owner no longer exists are kept with a None reporter.
    """
    return db.session.query(Report, User.name)\
        .outerjoin(User, Report.user_id == User.id)\
        .order_by(Report.created_at.desc(), Report.id.desc()).all()


def update_status(report_id, status=None):
    """Set a report's status. An empty status resets it to Pending."""
    key = _report_key(report_id)
    report = db.session.get(Report, key) if key is not None else None
    if report is None:
        raise NotFoundError(f'Report {report_id} not found')

    report.status = status or DEFAULT_STATUS
    _commit()
    logger.info('Report %s status set to %s', report_id, report.status)


def delete_report(report_id):
    """Delete a report. Deleting a missing id is not an error."""
    key = _report_key(report_id)
    deleted = 0
    if key is not None:
        deleted = Report.query.filter_by(id=key).delete()
        _commit()
    logger.info('Deleted report %s (%d row(s))', report_id, deleted)
