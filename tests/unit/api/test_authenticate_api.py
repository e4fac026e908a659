from __future__ import annotations

import pytest
import structlog

from common_api.api import AppAuthenticateApi, UserAuthenticateApi, VerifyCodeApi
from common_api.exceptions import ArgumentTypeError, ArgumentValueError, UnauthorizedError
from common_api.schemas import LoginResponse, RegisterUserParams, SocialNetwork, Token, VerifyScene

LOGIN = {
    "user": {"id": 1, "username": "admin"},
    "token": {"value": "abc", "max_age": 3600},
    "privileges": ["USER_READ"],
}


@pytest.mark.asyncio
async def test_login_by_username_posts_credentials(http, backend, loading) -> None:
    backend.reply(json=LOGIN)

    with structlog.testing.capture_logs() as logs:
        api = UserAuthenticateApi(http)
        response = await api.login_by_username("admin", "pa55")

    assert backend.path == "/authenticate/user/login"
    assert backend.body == {"username": "admin", "password": "pa55"}
    assert isinstance(response, LoginResponse)
    assert response.token.value == "abc"
    assert loading.events == [("show", "Logging in..."), ("clear",)]
    logged_in = [entry for entry in logs if entry["event"] == "user.logged_in"]
    assert logged_in[0]["username"] == "admin"


@pytest.mark.asyncio
async def test_login_variants_share_the_endpoint(http, backend) -> None:
    api = UserAuthenticateApi(http)

    await api.login_by_mobile("13800000000", "123456")
    mobile_body = backend.body
    await api.login_by_open_id(SocialNetwork.QQ, "app-1", "open-1")

    assert mobile_body == {"mobile": "13800000000", "verify_code": "123456"}
    assert backend.body == {"social_network": "QQ", "app_id": "app-1", "open_id": "open-1"}
    assert {r.url.path for r in backend.requests} == {"/api/authenticate/user/login"}


@pytest.mark.asyncio
async def test_failed_login_raises_unauthorized(http, backend) -> None:
    backend.reply(status_code=401, json={"code": "WRONG_PASSWORD", "message": "bad"})

    with pytest.raises(UnauthorizedError) as exc_info:
        await UserAuthenticateApi(http).login_by_username("admin", "nope")

    assert exc_info.value.code == "WRONG_PASSWORD"


@pytest.mark.asyncio
async def test_register_and_logout(http, backend) -> None:
    api = UserAuthenticateApi(http)
    backend.reply(json=LOGIN)

    response = await api.register(
        RegisterUserParams(username="admin", password="pa55", verify_code="654321")
    )
    register_body = backend.body
    await api.logout()

    assert response.user.username == "admin"
    assert register_body == {"username": "admin", "password": "pa55", "verify_code": "654321"}
    assert [r.url.path for r in backend.requests] == [
        "/api/authenticate/user/register",
        "/api/authenticate/user/logout",
    ]


@pytest.mark.asyncio
async def test_login_info_and_token_check(http, backend) -> None:
    api = UserAuthenticateApi(http)
    backend.reply(json=LOGIN)
    backend.reply(json={"value": "abc"})

    info = await api.get_login_info()
    token = await api.check_token(1, Token(value="abc"))

    assert info.privileges == ["USER_READ"]
    assert token.value == "abc"
    assert backend.path == "/authenticate/user/token/check"
    assert backend.params == {"id": "1", "token": "abc"}


@pytest.mark.asyncio
async def test_bind_open_id(http, backend) -> None:
    await UserAuthenticateApi(http).bind_open_id("WECHAT", "wx-app", "o-123")

    assert backend.path == "/authenticate/user/social-network/bind"
    assert backend.body == {"social_network": "WECHAT", "app_id": "wx-app", "open_id": "o-123"}


@pytest.mark.asyncio
async def test_reset_password_posts_form(http, backend) -> None:
    await UserAuthenticateApi(http).reset_password(None, "a@example.org", "n3w", "111222")

    assert backend.path == "/authenticate/user/password/reset"
    assert backend.last.headers["Content-Type"] == "application/x-www-form-urlencoded"
    assert backend.form == {
        "email": "a@example.org",
        "password": "n3w",
        "verifyCode": "111222",
    }


@pytest.mark.asyncio
async def test_reset_password_needs_mobile_or_email(http, backend) -> None:
    with pytest.raises(ArgumentValueError, match="cannot both be None"):
        await UserAuthenticateApi(http).reset_password(None, None, "n3w", "111222")

    assert backend.requests == []


@pytest.mark.asyncio
async def test_app_authenticate_sends_platform(http, backend) -> None:
    backend.reply(json={"value": "app-token", "max_age": 7200})

    token = await AppAuthenticateApi(http).authenticate(
        "crm", "key", {"ip": "10.0.0.1", "platform": "ANDROID"}
    )

    assert token.max_age == 7200
    assert backend.path == "/authenticate/app"
    assert backend.body == {
        "code": "crm",
        "security_key": "key",
        "ip": "10.0.0.1",
        "platform": "WEB",
    }


@pytest.mark.asyncio
async def test_app_token_check_and_refresh(http, backend) -> None:
    api = AppAuthenticateApi(http)

    await api.check_token("crm", {"value": "t1"})
    await api.refresh_token("crm", Token(value="t2"))

    assert [(r.url.path, dict(r.url.params)) for r in backend.requests] == [
        ("/api/authenticate/app/check", {"code": "crm", "token": "t1"}),
        ("/api/authenticate/app/refresh", {"code": "crm", "token": "t2"}),
    ]


@pytest.mark.asyncio
async def test_app_token_must_be_token_or_mapping(http) -> None:
    with pytest.raises(ArgumentTypeError, match="'token'"):
        await AppAuthenticateApi(http).check_token("crm", "t1")


@pytest.mark.asyncio
async def test_verify_codes_are_sent_as_forms(http, backend) -> None:
    api = VerifyCodeApi(http)

    await api.send_by_sms("13800000000", VerifyScene.LOGIN)
    sms_form = backend.form
    await api.send_by_email("a@example.org", "RESET_PASSWORD")

    assert sms_form == {"mobile": "13800000000", "scene": "LOGIN"}
    assert backend.path == "/verify-code/email"
    assert backend.form == {"email": "a@example.org", "scene": "RESET_PASSWORD"}
