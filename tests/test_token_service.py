import time
import uuid

import pytest

from order_api.domain.errors import TokenError
from order_api.services.token_service import TokenService


def test_issued_token_verifies_to_same_user(token_service):
    user_id = uuid.uuid4()
    token = token_service.issue(user_id)
    assert token_service.verify(token) == user_id


def test_token_lifetime_is_one_week(token_service):
    from jose import jwt

    token = token_service.issue(uuid.uuid4(), now=1_700_000_000)
    claims = jwt.get_unverified_claims(token)
    assert claims["iat"] == 1_700_000_000
    assert claims["exp"] - claims["iat"] == 604800


def test_expired_token_fails(token_service):
    eight_days_ago = int(time.time()) - 8 * 24 * 60 * 60
    token = token_service.issue(uuid.uuid4(), now=eight_days_ago)
    with pytest.raises(TokenError):
        token_service.verify(token)


def test_tampered_signature_fails(token_service):
    token = token_service.issue(uuid.uuid4())
    header, payload, signature = token.split(".")
    flipped = ("A" if signature[0] != "A" else "B") + signature[1:]
    with pytest.raises(TokenError):
        token_service.verify(".".join([header, payload, flipped]))


def test_token_signed_with_other_secret_fails(token_service):
    foreign = TokenService(secret="someone-else").issue(uuid.uuid4())
    with pytest.raises(TokenError):
        token_service.verify(foreign)


@pytest.mark.parametrize("garbage", ["", "not-a-token", "a.b.c"])
def test_malformed_token_fails(token_service, garbage):
    with pytest.raises(TokenError):
        token_service.verify(garbage)


def test_token_without_uuid_user_id_fails(token_service):
    from jose import jwt

    now = int(time.time())
    token = jwt.encode(
        {"user_id": "42", "iat": now, "exp": now + 60},
        token_service.secret,
        algorithm=token_service.algorithm,
    )
    with pytest.raises(TokenError):
        token_service.verify(token)
