import pytest

from favfilms.database.repos.user_repo import SqlAlchemyUserRepo
from favfilms.domain.errors import Conflict, InvalidCredentials
from favfilms.services.auth.service import AuthService


@pytest.fixture()
def auth(database, token_service):
    session = database.session()
    try:
        yield AuthService(SqlAlchemyUserRepo(session), token_service, bcrypt_rounds=4)
    finally:
        session.close()


def test_signup_then_login(auth, token_service):
    token, user = auth.signup(name="Ann", email="ann@x.com", password="pw123456")
    assert token_service.verify(token).email == "ann@x.com"
    assert user.password_hash != "pw123456"

    token2, same = auth.login(email="ann@x.com", password="pw123456")
    assert same.id == user.id
    assert token_service.verify(token2).user_id == str(user.id)


def test_signup_duplicate(auth):
    auth.signup(name="Ann", email="ann@x.com", password="pw123456")
    with pytest.raises(Conflict):
        auth.signup(name="Ann", email="Ann@x.com", password="another1")


@pytest.mark.parametrize("email,password", [("ann@x.com", "nope-nope"), ("bob@x.com", "pw123456")])
def test_login_failure(auth, email, password):
    auth.signup(name="Ann", email="ann@x.com", password="pw123456")
    with pytest.raises(InvalidCredentials):
        auth.login(email=email, password=password)
