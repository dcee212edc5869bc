import pytest

from safenetid import create_app
from safenetid.config import TestConfig


@pytest.fixture()
def app():
    return create_app(TestConfig)


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def admin_client(app):
    c = app.test_client()
    r = c.post('/api/admin/login', json={'username': TestConfig.ADMIN_USERNAME,
                                         'password': TestConfig.ADMIN_PASSWORD})
    assert r.get_json() == {'success': True}
    return c


def register(client, name='Alice', email='alice@example.com', password='secret'):
    return client.post('/api/register', json={'name': name, 'email': email, 'password': password})


def login(client, email='alice@example.com', password='secret'):
    return client.post('/api/login', json={'email': email, 'password': password})


@pytest.fixture()
def user_client(app):
    c = app.test_client()
    assert register(c).status_code == 200
    assert login(c).get_json()['success'] is True
    return c
