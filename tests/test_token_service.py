import pytest
from jose import jwt

from minilink.core.auth import TokenService, hash_password, verify_password
from minilink.core.exceptions import InvalidToken, Unauthenticated


def test_issue_then_verify_returns_user_id():
    tokens = TokenService("secret-a")
    token = tokens.issue("65f0c0ffee0000000000abcd")

    assert tokens.verify(token) == "65f0c0ffee0000000000abcd"


def test_token_carries_only_the_user_id():
    token = TokenService("secret-a").issue("abc")

    claims = jwt.get_unverified_claims(token)
    assert claims == {"id": "abc"}
    assert "secret-a" not in token


def test_issue_is_deterministic():
    tokens = TokenService("secret-a")
    assert tokens.issue("abc") == tokens.issue("abc")


def test_token_signed_with_other_secret_is_rejected():
    token = TokenService("secret-a").issue("abc")

    with pytest.raises(InvalidToken):
        TokenService("secret-b").verify(token)


@pytest.mark.parametrize("token", ["", "not-a-jwt", "a.b.c"])
def test_malformed_token_is_rejected(token):
    with pytest.raises(InvalidToken):
        TokenService("secret-a").verify(token)


def test_token_without_id_is_rejected():
    token = jwt.encode({"sub": "abc"}, "secret-a", algorithm="HS256")

    with pytest.raises(InvalidToken):
        TokenService("secret-a").verify(token)


def test_invalid_token_is_unauthenticated():
    assert issubclass(InvalidToken, Unauthenticated)
    assert InvalidToken().status_code == 401


def test_empty_secret_is_refused():
    with pytest.raises(ValueError):
        TokenService("")


def test_password_hash_roundtrip():
    hashed = hash_password("pw1")

    assert hashed != "pw1"
    assert verify_password("pw1", hashed)
    assert not verify_password("pw2", hashed)
