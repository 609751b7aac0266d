import pytest
from mentorhub import create_app, db
from mentorhub import accounts, mentors
from mentorhub.auth import generate_token


@pytest.fixture
def app():
    app = create_app('mentorhub.config.TestingConfig')
    with app.app_context():
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def make_account(app):
    def _make_account(name='Ana', email='ana@example.com', password='secret', **fields):
        account = accounts.create(name, email, password)
        if fields:
            account = accounts.update(account.id, fields)
        return account
    return _make_account


@pytest.fixture
def mentor(make_account):
    return make_account(name='Maria Mentor', email='maria@example.com', role='mentor', company='ACME')


@pytest.fixture
def knowledge_area(app):
    return mentors.create_knowledge_area('Databases')


@pytest.fixture
def auth_headers(make_account):
    account = make_account(name='Caller', email='caller@example.com')
    return {'Authorization': f'Bearer {generate_token(account)}'}


@pytest.fixture
def headers_for(app):
    def _headers_for(account):
        return {'Authorization': f'Bearer {generate_token(account)}'}
    return _headers_for
