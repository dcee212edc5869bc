from conftest import register, login


def test_anonymous_cannot_read_reports(client):
    r = client.get('/api/my-reports')
    assert r.status_code == 401
    assert r.get_json() == {'success': False, 'error': 'Unauthorized'}


def test_anonymous_cannot_submit(client):
    r = client.post('/api/report', json={'site': 'http://example.com'})
    assert r.status_code == 401


def test_dashboard_redirects_anonymous(client):
    r = client.get('/dashboard.html')
    assert r.status_code in (301, 302)
    assert r.headers['Location'].endswith('/login.html')


def test_dashboard_for_user(user_client):
    r = user_client.get('/dashboard.html')
    assert r.status_code == 200
    assert 'Welcome, Alice' in r.get_data(as_text=True)


def test_create_report_without_note(user_client):
    r = user_client.post('/api/report', json={'site': 'http://example.com'})
    assert r.status_code == 200
    report_id = r.get_json()['id']

    reports = user_client.get('/api/my-reports').get_json()
    assert len(reports) == 1
    item = reports[0]
    assert item['id'] == report_id
    assert item['site'] == 'http://example.com'
    assert item['note'] is None
    assert item['status'] == 'Pending'
    for key in ('user_id', 'created_at'):
        assert key in item


def test_create_report_requires_site(user_client):
    r = user_client.post('/api/report', json={'note': 'no site'})
    assert r.status_code == 400
    assert r.get_json() == {'success': False, 'error': 'site required'}


def test_my_reports_newest_first_and_scoped(app, user_client):
    user_client.post('/api/report', json={'site': 'http://one.example'})
    user_client.post('/api/report', json={'site': 'http://two.example', 'note': 'phishing'})

    other = app.test_client()
    register(other, name='Bob', email='bob@example.com')
    login(other, email='bob@example.com')
    other.post('/api/report', json={'site': 'http://bob.example'})

    sites = [r['site'] for r in user_client.get('/api/my-reports').get_json()]
    assert sites == ['http://two.example', 'http://one.example']
    assert [r['site'] for r in other.get('/api/my-reports').get_json()] == ['http://bob.example']


def test_reports_survive_session_churn(client):
    register(client)
    login(client)
    client.post('/api/report', json={'site': 'http://example.com'})
    client.post('/api/logout')
    assert client.get('/api/my-reports').status_code == 401

    login(client)
    reports = client.get('/api/my-reports').get_json()
    assert [r['site'] for r in reports] == ['http://example.com']


def test_unknown_path_is_404(client):
    r = client.get('/no-such-page')
    assert r.status_code == 404
    assert r.get_data(as_text=True) == 'Not found'
