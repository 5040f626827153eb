from vocabmaster_app.models import User


def test_data_endpoints_require_login(client):
    response = client.get('/api/collections')
    assert response.status_code == 401
    assert response.get_json()['message'] == 'Unauthorized'
    assert response.get_json()['code'] == 'UNAUTHORIZED'
    assert response.get_json()['success'] is False


def test_dev_login_creates_user_once(app, client):
    payload = {'email': 'New.Person@Example.com', 'firstName': 'New', 'lastName': 'Person'}
    first = client.post('/api/login', json=payload)
    assert first.status_code == 200
    assert first.get_json()['email'] == 'new.person@example.com'

    second = client.post('/api/login', json={'email': 'new.person@example.com'})
    assert second.get_json()['id'] == first.get_json()['id']
    assert second.get_json()['firstName'] == 'New'
    assert User.query.count() == 1

    me = client.get('/api/auth/user')
    assert me.status_code == 200
    assert me.get_json()['email'] == 'new.person@example.com'


def test_dev_login_rejects_bad_email(client):
    response = client.post('/api/login', json={'email': 'not-an-email'})
    assert response.status_code == 400
    assert response.get_json()['code'] == 'VALIDATION_ERROR'


def test_dev_login_can_be_disabled(app, client):
    app.config['ALLOW_DEV_LOGIN'] = False
    response = client.post('/api/login', json={'email': 'a@example.com'})
    assert response.status_code == 404


def test_profile_update(auth_client):
    response = auth_client.patch('/api/profile', json={'firstName': 'Grace'})
    assert response.status_code == 200
    body = response.get_json()
    assert body['firstName'] == 'Grace'
    assert body['lastName'] == 'Learner'


def test_logout(auth_client):
    assert auth_client.post('/api/logout').status_code == 204
    assert auth_client.get('/api/auth/user').status_code == 401


def test_unknown_api_route_returns_json(auth_client):
    response = auth_client.get('/api/does-not-exist')
    assert response.status_code == 404
    assert response.get_json()['success'] is False
