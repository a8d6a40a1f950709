from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest

from taskdesk.application.services.session_cookies import SessionCookieCodec
from taskdesk.application.services.session_tokens import SignedSessionTokenCodec
from taskdesk.application.use_cases.users.login_user import LoginUserUseCase
from taskdesk.application.use_cases.users.logout_user import LogoutUserUseCase
from taskdesk.application.use_cases.users.register_user import RegisterUserUseCase
from taskdesk.application.use_cases.users.resolve_session import ResolveSessionUseCase
from taskdesk.domain.users.entities import NewUser, User
from taskdesk.domain.users.exceptions import InvalidCredentialsError, UserAlreadyExistsError
from taskdesk.domain.users.repositories import UserRepository
from taskdesk.shared.errors import OperationFailedError, ValidationError

from .conftest import DeterministicHasher, FakeClock


class InMemoryUserRepository(UserRepository):
    def __init__(self) -> None:
        self._users: dict[str, User] = {}
        self._seq = 1

    def find_user_by_email(self, email: str) -> User | None:
        return next((u for u in self._users.values() if u.email == email), None)

    def find_user_by_id(self, user_id: str) -> User | None:
        return self._users.get(user_id)

    def create_user(self, fields: NewUser) -> User:
        if self.find_user_by_email(fields.email):
            raise UserAlreadyExistsError()
        user = User(
            id=f"u{self._seq}",
            name=fields.name,
            email=fields.email,
            password_hash=fields.password_hash,
            created_at=datetime(2026, 1, 1, tzinfo=UTC),
        )
        self._seq += 1
        self._users[user.id] = user
        return user

    def remove(self, user_id: str) -> None:
        self._users.pop(user_id, None)


class ExplodingHasher(DeterministicHasher):
    def hash(self, password: str) -> str:
        raise OperationFailedError("hash_password")


@pytest.fixture()
def users() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture()
def tokens(clock: FakeClock) -> SignedSessionTokenCodec:
    return SignedSessionTokenCodec("unit-test-secret", clock=clock)


@pytest.fixture()
def cookies() -> SessionCookieCodec:
    return SessionCookieCodec(secure=False)


@pytest.fixture()
def register(users: InMemoryUserRepository) -> RegisterUserUseCase:
    return RegisterUserUseCase(users=users, password_hasher=DeterministicHasher())


@pytest.fixture()
def login(
    users: InMemoryUserRepository,
    tokens: SignedSessionTokenCodec,
    cookies: SessionCookieCodec,
) -> LoginUserUseCase:
    return LoginUserUseCase(
        users=users, tokens=tokens, cookies=cookies, password_hasher=DeterministicHasher()
    )


@pytest.fixture()
def resolve(
    users: InMemoryUserRepository, tokens: SignedSessionTokenCodec
) -> ResolveSessionUseCase:
    return ResolveSessionUseCase(users=users, tokens=tokens)


def test_register_user_success(
    register: RegisterUserUseCase, users: InMemoryUserRepository
) -> None:
    profile = register.execute("Alice", "alice@x.com", "secret123")

    assert profile.email == "alice@x.com"
    assert not hasattr(profile, "password_hash")
    stored = users.find_user_by_email("alice@x.com")
    assert stored is not None
    assert stored.password_hash == "hashed:secret123"


def test_register_user_duplicate_email(register: RegisterUserUseCase) -> None:
    register.execute("Alice", "alice@x.com", "secret123")

    with pytest.raises(UserAlreadyExistsError) as exc_info:
        register.execute("Other Alice", "alice@x.com", "another123")

    assert exc_info.value.code == "user_already_exists"
    assert int(exc_info.value.status) == 409


@pytest.mark.parametrize(
    ("name", "email", "password", "field"),
    [
        ("", "a@x.com", "secret123", "name"),
        ("Alice", "   ", "secret123", "email"),
        ("Alice", "a@x.com", "", "password"),
    ],
)
def test_register_user_requires_every_field(
    register: RegisterUserUseCase,
    users: InMemoryUserRepository,
    name: str,
    email: str,
    password: str,
    field: str,
) -> None:
    with pytest.raises(ValidationError) as exc_info:
        register.execute(name, email, password)

    assert exc_info.value.context is not None
    assert exc_info.value.context["fields"] == [field]
    assert users.find_user_by_email(email) is None


def test_register_user_short_password(register: RegisterUserUseCase) -> None:
    with pytest.raises(ValidationError) as exc_info:
        register.execute("Alice", "alice@x.com", "12345")

    assert exc_info.value.code == "validation_error"
    assert exc_info.value.context["errors"][0]["type"] == "password_too_short"


def test_register_user_hash_failure_stores_nothing(users: InMemoryUserRepository) -> None:
    use_case = RegisterUserUseCase(users=users, password_hasher=ExplodingHasher())

    with pytest.raises(OperationFailedError):
        use_case.execute("Alice", "alice@x.com", "secret123")

    assert users.find_user_by_email("alice@x.com") is None


def test_login_user_success(
    register: RegisterUserUseCase,
    login: LoginUserUseCase,
    resolve: ResolveSessionUseCase,
) -> None:
    created = register.execute("Alice", "alice@x.com", "secret123")

    result = login.execute("alice@x.com", "secret123")

    assert result.user == created
    assert result.cookie.name == "auth_token"
    assert result.cookie.value == result.token
    assert result.cookie.httponly is True
    assert result.cookie.max_age == 7 * 24 * 60 * 60
    assert resolve.execute(result.token) == created.id


def test_login_failures_are_indistinguishable(
    register: RegisterUserUseCase, login: LoginUserUseCase
) -> None:
    register.execute("Alice", "alice@x.com", "secret123")

    with pytest.raises(InvalidCredentialsError) as wrong_password:
        login.execute("alice@x.com", "wrong-password")
    with pytest.raises(InvalidCredentialsError) as unknown_email:
        login.execute("nobody@x.com", "secret123")

    assert wrong_password.value.to_dict() == unknown_email.value.to_dict()
    assert wrong_password.value.status == unknown_email.value.status


def test_login_rejects_account_without_password(
    users: InMemoryUserRepository, login: LoginUserUseCase
) -> None:
    users.create_user(NewUser(name="Demo", email="demo@x.com", password_hash=""))

    with pytest.raises(InvalidCredentialsError):
        login.execute("demo@x.com", "")


def test_resolve_session_anonymous_inputs(resolve: ResolveSessionUseCase) -> None:
    assert resolve.execute(None) is None
    assert resolve.execute("") is None
    assert resolve.current_user("not-a-token") is None


def test_resolve_session_expired_token(
    register: RegisterUserUseCase,
    login: LoginUserUseCase,
    resolve: ResolveSessionUseCase,
    clock: FakeClock,
) -> None:
    register.execute("Alice", "alice@x.com", "secret123")
    token = login.execute("alice@x.com", "secret123").token

    clock.advance(days=7, seconds=1)

    assert resolve.execute(token) is None


def test_resolve_session_for_deleted_user(
    register: RegisterUserUseCase,
    login: LoginUserUseCase,
    resolve: ResolveSessionUseCase,
    users: InMemoryUserRepository,
) -> None:
    profile = register.execute("Alice", "alice@x.com", "secret123")
    token = login.execute("alice@x.com", "secret123").token

    users.remove(profile.id)

    assert resolve.current_user(token) is None


def test_resolve_session_rejects_other_secret(
    register: RegisterUserUseCase, login: LoginUserUseCase, users: InMemoryUserRepository
) -> None:
    register.execute("Alice", "alice@x.com", "secret123")
    token = login.execute("alice@x.com", "secret123").token
    rotated = ResolveSessionUseCase(
        users=users, tokens=SignedSessionTokenCodec("rotated-secret")
    )

    assert rotated.execute(token) is None


def test_logout_user_returns_clearing_cookie(cookies: SessionCookieCodec) -> None:
    cookie = LogoutUserUseCase(cookies=cookies).execute()

    assert cookie.name == "auth_token"
    assert cookie.value == ""
    assert cookie.max_age == 0
    assert cookie.expired is True


def test_token_lifetime_follows_codec(users: InMemoryUserRepository, clock: FakeClock) -> None:
    tokens = SignedSessionTokenCodec("unit-test-secret", lifetime=timedelta(hours=1), clock=clock)
    register = RegisterUserUseCase(users=users, password_hasher=DeterministicHasher())
    login = LoginUserUseCase(
        users=users,
        tokens=tokens,
        cookies=SessionCookieCodec(secure=True, max_age=3600),
        password_hasher=DeterministicHasher(),
    )
    resolve = ResolveSessionUseCase(users=users, tokens=tokens)
    register.execute("Alice", "alice@x.com", "secret123")

    result = login.execute("alice@x.com", "secret123")
    clock.advance(minutes=59)
    assert resolve.execute(result.token) is not None
    clock.advance(minutes=2)
    assert resolve.execute(result.token) is None
    assert result.cookie.secure is True


class CountingHasher(DeterministicHasher):
    def __init__(self) -> None:
        self.hashed: list[str] = []
        self.verified: list[str] = []

    def hash(self, password: str) -> str:
        self.hashed.append(password)
        return super().hash(password)

    def verify(self, password: str, hashed: str) -> bool:
        self.verified.append(hashed)
        return super().verify(password, hashed)


def test_unknown_email_still_runs_password_check(
    users: InMemoryUserRepository,
    tokens: SignedSessionTokenCodec,
    cookies: SessionCookieCodec,
) -> None:
    hasher = CountingHasher()
    login = LoginUserUseCase(users=users, tokens=tokens, cookies=cookies, password_hasher=hasher)

    for _ in range(2):
        with pytest.raises(InvalidCredentialsError):
            login.execute("ghost@x.com", "secret123")

    assert len(hasher.verified) == 2
    assert hasher.verified[0] == hasher.verified[1] != ""
    assert len(hasher.hashed) == 1
    assert "secret123" not in hasher.hashed
