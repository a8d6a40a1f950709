# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, g, jsonify, request
from pydantic import ValidationError

from taskdesk.application.services.session_cookies import SessionCookieCodec
from taskdesk.application.use_cases.users.login_user import LoginUserUseCase
from taskdesk.application.use_cases.users.logout_user import LogoutUserUseCase
from taskdesk.application.use_cases.users.register_user import RegisterUserUseCase
from taskdesk.application.use_cases.users.resolve_session import ResolveSessionUseCase
from taskdesk.domain.users.exceptions import AuthenticationRequiredError
from taskdesk.interfaces.http.dto.auth import (
    AuthSuccessDTO,
    LoginRequestDTO,
    RegisterRequestDTO,
    UserDTO,
)
from taskdesk.shared.errors.validation import raise_validation_error
from taskdesk.shared.logging import logger, set_log_user


class AuthController:
    def __init__(
        self,
        *,
        register_use_case: RegisterUserUseCase,
        login_use_case: LoginUserUseCase,
        logout_use_case: LogoutUserUseCase,
        resolve_session_use_case: ResolveSessionUseCase,
        cookies: SessionCookieCodec,
    ) -> None:
        self._register_use_case = register_use_case
        self._login_use_case = login_use_case
        self._logout_use_case = logout_use_case
        self._resolve_session_use_case = resolve_session_use_case
        self._cookies = cookies

    def register(self) -> tuple[Response, int]:
        try:
            dto = RegisterRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        user = self._register_use_case.execute(dto.name, dto.email, dto.password)

        payload = AuthSuccessDTO(
            user=UserDTO.from_profile(user),
            message="Account created successfully! Please login.",
        ).to_payload()
        logger.info(f"auth.register: ok user_id={user.id}")
        return jsonify(payload), 201

    def login(self) -> tuple[Response, int]:
        try:
            dto = LoginRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        result = self._login_use_case.execute(dto.email, dto.password)
        g.user_id = result.user.id
        set_log_user(result.user.id)

        response = jsonify(AuthSuccessDTO(user=UserDTO.from_profile(result.user)).to_payload())
        result.cookie.apply(response)
        return response, 200

    def logout(self) -> tuple[Response, int]:
        response = jsonify(AuthSuccessDTO().to_payload())
        self._logout_use_case.execute().apply(response)
        logger.info("auth.logout: ok")
        return response, 200

    def me(self) -> tuple[Response, int]:
        token = self._cookies.extract(request.cookies)
        user = self._resolve_session_use_case.current_user(token)
        if user is None:
            error = AuthenticationRequiredError()
            response = jsonify(error.to_dict())
            if token:
                # Drop a cookie that can never authenticate again.
                self._cookies.clear().apply(response)
            return response, int(error.status)

        g.user_id = user.id
        set_log_user(user.id)
        return jsonify(AuthSuccessDTO(user=UserDTO.from_profile(user)).to_payload()), 200

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("auth", __name__, url_prefix="/api/auth")
        bp.add_url_rule("/register", view_func=self.register, methods=["POST"])
        bp.add_url_rule("/login", view_func=self.login, methods=["POST"])
        bp.add_url_rule("/logout", view_func=self.logout, methods=["POST", "DELETE"])
        bp.add_url_rule("/me", view_func=self.me, methods=["GET"])
        return bp
