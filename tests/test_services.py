import pytest

from safenetid import create_app
from safenetid.config import TestConfig
from safenetid.errors import DuplicateError, NotFoundError, ValidationError
from safenetid.extensions import db
from safenetid.models import Admin, Report, User
from safenetid.services import (
    create_user, find_user_by_email, create_admin, find_admin_by_username, ensure_admin,
    hash_password, verify_password,
    create_report, list_by_user, list_all, update_status, delete_report
)


@pytest.fixture(autouse=True)
def app_context(app):
    with app.app_context():
        yield


def test_hash_and_verify():
    h = hash_password('hunter2')
    assert h != 'hunter2'
    assert verify_password('hunter2', h)
    assert not verify_password('hunter3', h)
    assert not verify_password(None, h)


def test_hashes_are_salted():
    assert hash_password('same') != hash_password('same')


def test_user_roundtrip_and_duplicate():
    user_id = create_user('Alice', 'alice@example.com', hash_password('pw'))
    user = find_user_by_email('alice@example.com')
    assert user.id == user_id
    assert user.get_id() == f'user:{user_id}'
    assert find_user_by_email('bob@example.com') is None

    with pytest.raises(DuplicateError):
        create_user('Alice 2', 'alice@example.com', hash_password('pw'))
    # the session is usable after the rollback
    assert User.query.count() == 1


def test_admin_duplicate():
    with pytest.raises(DuplicateError):
        create_admin(TestConfig.ADMIN_USERNAME, hash_password('pw'))


def test_bootstrap_admin_created(app):
    admin = find_admin_by_username(TestConfig.ADMIN_USERNAME)
    assert admin is not None
    assert admin.get_id() == f'admin:{admin.id}'
    assert verify_password(TestConfig.ADMIN_PASSWORD, admin.password_hash)
    # idempotent
    assert ensure_admin(TestConfig.ADMIN_USERNAME, 'other').id == admin.id
    assert Admin.query.count() == 1


class NoAdminPasswordConfig(TestConfig):
    ADMIN_PASSWORD = None


def test_bootstrap_skipped_without_password():
    app = create_app(NoAdminPasswordConfig)
    with app.app_context():
        assert Admin.query.count() == 0


def test_report_lifecycle():
    user_id = create_user('Alice', 'alice@example.com', hash_password('pw'))
    first = create_report(user_id, 'http://one.example')
    second = create_report(user_id, 'http://two.example', 'note')

    assert [r.id for r in list_by_user(user_id)] == [second, first]

    update_status(first, 'Resolved')
    assert db.session.get(Report, first).status == 'Resolved'

    update_status(first)
    assert [r.status for r in list_by_user(user_id)] == ['Pending', 'Pending']

    delete_report(first)
    delete_report(first)
    assert [r.id for r in list_by_user(user_id)] == [second]


def test_create_report_requires_site():
    with pytest.raises(ValidationError):
        create_report(1, '')


def test_update_missing_report():
    with pytest.raises(NotFoundError):
        update_status(12345, 'Resolved')


def test_list_all_keeps_orphaned_reports():
    user_id = create_user('Alice', 'alice@example.com', hash_password('pw'))
    report_id = create_report(user_id, 'http://example.com')

    db.session.delete(db.session.get(User, user_id))
    db.session.commit()

    rows = list_all()
    assert len(rows) == 1
    report, reporter = rows[0]
    assert report.id == report_id
    assert reporter is None


def test_deleted_user_id_is_not_reused():
    old_id = create_user('Old', 'old@example.com', hash_password('pw'))
    report_id = create_report(old_id, 'http://old.example')

    db.session.delete(db.session.get(User, old_id))
    db.session.commit()
    new_id = create_user('New', 'new@example.com', hash_password('pw'))

    assert new_id != old_id
    assert list_by_user(new_id) == []
    assert db.session.get(Report, report_id).user_id is None


def test_lookups_ignore_non_string_keys():
    assert find_user_by_email(None) is None
    assert not verify_password(123, hash_password('123'))


def test_report_ids_from_urls():
    user_id = create_user('Alice', 'alice@example.com', hash_password('pw'))
    report_id = create_report(user_id, 'http://example.com')

    with pytest.raises(NotFoundError):
        update_status('abc', 'Resolved')
    with pytest.raises(NotFoundError):
        update_status(str(2 ** 70), 'Resolved')
    delete_report('abc')
    delete_report('-1')

    update_status(str(report_id), 'Resolved')
    assert db.session.get(Report, report_id).status == 'Resolved'
