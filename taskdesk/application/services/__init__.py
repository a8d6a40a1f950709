# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .password_hashing import WerkzeugPasswordHasher
from .session_cookies import COOKIE_NAME, SessionCookie, SessionCookieCodec
from .session_tokens import SignedSessionTokenCodec

__all__ = [
    "COOKIE_NAME",
    "SessionCookie",
    "SessionCookieCodec",
    "SignedSessionTokenCodec",
    "WerkzeugPasswordHasher",
]
