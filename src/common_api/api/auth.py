"""Authentication of users and apps, and delivery of verification codes."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Optional, Union

from ..exceptions import ArgumentValueError
from ..impl.options import create_entity, to_json
from ..schemas.auth import LoginResponse, RegisterUserParams, Token, VerifyScene
from ..schemas.common import Id
from ..schemas.system import SocialNetwork
from ..utils.checks import check_argument_type, check_id_argument_type, get_field
from .base import BaseApi

__all__ = ["UserAuthenticateApi", "AppAuthenticateApi", "VerifyCodeApi"]


class UserAuthenticateApi(BaseApi):
    """Registration, login and logout of users.

    Every login variant posts to the same endpoint; the server tells them
    apart by the fields present in the body.
    """

    async def _login(self, data: dict[str, Any], show_loading: bool) -> Optional[LoginResponse]:
        check_argument_type("show_loading", show_loading, bool)
        if show_loading:
            self.http.loading.show("Logging in...")
        obj = await self.http.post("/authenticate/user/login", json=to_json(data))
        response = create_entity(LoginResponse, obj)
        self.logger.info("user.logged_in", username=_username(response))
        return response

    async def register(
        self,
        params: Union[RegisterUserParams, Mapping[str, Any]],
        show_loading: bool = True,
    ) -> Optional[LoginResponse]:
        check_argument_type("params", params, (RegisterUserParams, Mapping))
        check_argument_type("show_loading", show_loading, bool)
        if show_loading:
            self.http.loading.show("Registering the new user...")
        obj = await self.http.post("/authenticate/user/register", json=to_json(params))
        response = create_entity(LoginResponse, obj)
        self.logger.info("user.registered", username=_username(response))
        return response

    async def login_by_username(
        self, username: str, password: str, show_loading: bool = True
    ) -> Optional[LoginResponse]:
        check_argument_type("username", username, str)
        check_argument_type("password", password, str)
        return await self._login({"username": username, "password": password}, show_loading)

    async def login_by_mobile(
        self, mobile: str, verify_code: str, show_loading: bool = True
    ) -> Optional[LoginResponse]:
        check_argument_type("mobile", mobile, str)
        check_argument_type("verify_code", verify_code, str)
        return await self._login({"mobile": mobile, "verify_code": verify_code}, show_loading)

    async def login_by_open_id(
        self,
        social_network: Union[SocialNetwork, str],
        app_id: str,
        open_id: str,
        show_loading: bool = True,
    ) -> Optional[LoginResponse]:
        check_argument_type("social_network", social_network, (SocialNetwork, str))
        check_argument_type("app_id", app_id, str)
        check_argument_type("open_id", open_id, str)
        return await self._login(
            {"social_network": social_network, "app_id": app_id, "open_id": open_id},
            show_loading,
        )

    async def logout(self, show_loading: bool = True) -> None:
        check_argument_type("show_loading", show_loading, bool)
        if show_loading:
            self.http.loading.show("Logging out...")
        await self.http.post("/authenticate/user/logout")
        self.logger.info("user.logged_out")

    async def get_login_info(self, show_loading: bool = True) -> Optional[LoginResponse]:
        check_argument_type("show_loading", show_loading, bool)
        if show_loading:
            self.http.loading.show_getting()
        obj = await self.http.get("/authenticate/user/info")
        response = create_entity(LoginResponse, obj)
        self.logger.info("user.login_info_got", username=_username(response))
        return response

    async def check_token(
        self,
        user_id: Id,
        token: Union[Token, Mapping[str, Any]],
        show_loading: bool = True,
    ) -> Optional[Token]:
        """Return the token when it is still valid for the user; raises otherwise."""

        check_id_argument_type(user_id, "user_id")
        check_argument_type("token", token, (Token, Mapping))
        check_argument_type("show_loading", show_loading, bool)
        if show_loading:
            self.http.loading.show("Checking the access token...")
        obj = await self.http.get(
            "/authenticate/user/token/check",
            params={"id": user_id, "token": get_field(token, "value")},
        )
        result = create_entity(Token, obj)
        self.logger.info("user.token_checked", user_id=user_id)
        return result

    async def bind_open_id(
        self,
        social_network: Union[SocialNetwork, str],
        app_id: str,
        open_id: str,
        show_loading: bool = True,
    ) -> None:
        """Bind a social network account to the logged-in user."""

        check_argument_type("social_network", social_network, (SocialNetwork, str))
        check_argument_type("app_id", app_id, str)
        check_argument_type("open_id", open_id, str)
        check_argument_type("show_loading", show_loading, bool)
        data = {"social_network": social_network, "app_id": app_id, "open_id": open_id}
        if show_loading:
            self.http.loading.show("Binding the account...")
        await self.http.post("/authenticate/user/social-network/bind", json=to_json(data))
        self.logger.info("user.open_id_bound", **to_json(data))

    async def reset_password(
        self,
        mobile: Optional[str],
        email: Optional[str],
        password: str,
        verify_code: str,
        show_loading: bool = True,
    ) -> None:
        """Reset the password of the user owning ``mobile`` or ``email``."""

        check_argument_type("mobile", mobile, str, nullable=True)
        check_argument_type("email", email, str, nullable=True)
        check_argument_type("password", password, str)
        check_argument_type("verify_code", verify_code, str)
        check_argument_type("show_loading", show_loading, bool)
        if mobile is None and email is None:
            raise ArgumentValueError("The mobile and the email cannot both be None.")
        form: dict[str, str] = {}
        if mobile:
            form["mobile"] = mobile
        if email:
            form["email"] = email
        form["password"] = password
        form["verifyCode"] = verify_code
        if show_loading:
            self.http.loading.show("Resetting the password...")
        await self.http.post("/authenticate/user/password/reset", data=form)
        self.logger.info("user.password_reset", mobile=mobile, email=email)


def _username(response: Optional[LoginResponse]) -> Optional[str]:
    if response is None or response.user is None:
        return None
    return response.user.username


class AppAuthenticateApi(BaseApi):
    """Tokens identifying the client app to the backend."""

    platform = "WEB"

    async def authenticate(
        self,
        code: str,
        security_key: str,
        environment: Optional[Mapping[str, Any]] = None,
        show_loading: bool = True,
    ) -> Optional[Token]:
        check_argument_type("code", code, str)
        check_argument_type("security_key", security_key, str)
        check_argument_type("environment", environment, Mapping, nullable=True)
        check_argument_type("show_loading", show_loading, bool)
        data = {
            "code": code,
            "security_key": security_key,
            **(environment or {}),
            "platform": self.platform,
        }
        if show_loading:
            self.http.loading.show("Authenticating the app...")
        obj = await self.http.post("/authenticate/app", json=to_json(data))
        token = create_entity(Token, obj)
        self.logger.info("app.authenticated", code=code)
        return token

    async def _token_request(
        self, url: str, code: Any, token: Any, message: str, show_loading: bool
    ) -> Optional[Token]:
        check_argument_type("code", code, str)
        check_argument_type("token", token, (Token, Mapping))
        check_argument_type("show_loading", show_loading, bool)
        if show_loading:
            self.http.loading.show(message)
        obj = await self.http.get(
            url, params={"code": code, "token": get_field(token, "value")}
        )
        return create_entity(Token, obj)

    async def check_token(
        self, code: str, token: Union[Token, Mapping[str, Any]], show_loading: bool = True
    ) -> Optional[Token]:
        result = await self._token_request(
            "/authenticate/app/check", code, token, "Checking the app token...", show_loading
        )
        self.logger.info("app.token_checked", code=code)
        return result

    async def refresh_token(
        self, code: str, token: Union[Token, Mapping[str, Any]], show_loading: bool = True
    ) -> Optional[Token]:
        result = await self._token_request(
            "/authenticate/app/refresh",
            code,
            token,
            "Refreshing the app token...",
            show_loading,
        )
        self.logger.info("app.token_refreshed", code=code)
        return result


class VerifyCodeApi(BaseApi):
    """Sends one-time verification codes by SMS or email."""

    async def _send(
        self, url: str, field: str, target: Any, scene: Any, message: str, show_loading: bool
    ) -> None:
        check_argument_type(field, target, str)
        check_argument_type("scene", scene, (VerifyScene, str))
        check_argument_type("show_loading", show_loading, bool)
        self.logger.info("verify_code.sending", **{field: target})
        if show_loading:
            self.http.loading.show(message)
        await self.http.post(url, data={field: target, "scene": to_json(scene)})
        self.logger.info("verify_code.sent", **{field: target})

    async def send_by_sms(
        self, mobile: str, scene: Union[VerifyScene, str], show_loading: bool = True
    ) -> None:
        await self._send(
            "/verify-code/sms",
            "mobile",
            mobile,
            scene,
            "Sending the verification code to the mobile...",
            show_loading,
        )

    async def send_by_email(
        self, email: str, scene: Union[VerifyScene, str], show_loading: bool = True
    ) -> None:
        await self._send(
            "/verify-code/email",
            "email",
            email,
            scene,
            "Sending the verification code to the email...",
            show_loading,
        )
