# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from taskdesk.shared.errors.base import AuthenticationError, ConflictError


class UserAlreadyExistsError(ConflictError):
    code = "user_already_exists"


class InvalidCredentialsError(AuthenticationError):
    code = "invalid_credentials"


class AuthenticationRequiredError(AuthenticationError):
    code = "unauthorized"
