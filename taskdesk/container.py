"""Application dependency container."""

from __future__ import annotations

from datetime import timedelta
from functools import cached_property

from taskdesk.application.services.password_hashing import WerkzeugPasswordHasher
from taskdesk.application.services.session_cookies import SessionCookieCodec
from taskdesk.application.services.session_tokens import SignedSessionTokenCodec
from taskdesk.application.use_cases.tasks import (
    CreateTaskUseCase,
    DeleteTaskUseCase,
    GetTaskUseCase,
    ListTasksUseCase,
    SummarizeTasksUseCase,
    UpdateTaskUseCase,
)
from taskdesk.application.use_cases.users import (
    LoginUserUseCase,
    LogoutUserUseCase,
    RegisterUserUseCase,
    ResolveSessionUseCase,
)
from taskdesk.infrastructure.storage import JsonDocumentStore
from taskdesk.interfaces.http.controllers.auth_controller import AuthController
from taskdesk.interfaces.http.controllers.misc_controller import MiscController
from taskdesk.interfaces.http.controllers.tasks_controller import TasksController
from taskdesk.interfaces.http.session import RequestSession
from taskdesk.shared.config import AppConfig, load_config


class Container:
    def __init__(
        self,
        config: AppConfig | None = None,
        *,
        store: JsonDocumentStore | None = None,
    ) -> None:
        self.config = config or load_config()
        if store is not None:
            self.__dict__["store"] = store

    @cached_property
    def password_hasher(self) -> WerkzeugPasswordHasher:
        return WerkzeugPasswordHasher()

    @cached_property
    def store(self) -> JsonDocumentStore:
        demo_hash = ""
        if self.config.demo_password:
            demo_hash = self.password_hasher.hash(self.config.demo_password)
        return JsonDocumentStore(self.config.data_file, demo_password_hash=demo_hash)

    @cached_property
    def session_tokens(self) -> SignedSessionTokenCodec:
        return SignedSessionTokenCodec(
            self.config.secret_key,
            lifetime=timedelta(days=self.config.session_lifetime_days),
        )

    @cached_property
    def session_cookies(self) -> SessionCookieCodec:
        return SessionCookieCodec(
            secure=self.config.secure_cookies,
            max_age=self.config.session_lifetime_seconds,
        )

    @cached_property
    def register_user_use_case(self) -> RegisterUserUseCase:
        return RegisterUserUseCase(users=self.store, password_hasher=self.password_hasher)

    @cached_property
    def login_user_use_case(self) -> LoginUserUseCase:
        return LoginUserUseCase(
            users=self.store,
            tokens=self.session_tokens,
            cookies=self.session_cookies,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def logout_user_use_case(self) -> LogoutUserUseCase:
        return LogoutUserUseCase(cookies=self.session_cookies)

    @cached_property
    def resolve_session_use_case(self) -> ResolveSessionUseCase:
        return ResolveSessionUseCase(users=self.store, tokens=self.session_tokens)

    @cached_property
    def request_session(self) -> RequestSession:
        return RequestSession(
            cookies=self.session_cookies,
            resolve_session=self.resolve_session_use_case,
        )

    @cached_property
    def auth_controller(self) -> AuthController:
        return AuthController(
            register_use_case=self.register_user_use_case,
            login_use_case=self.login_user_use_case,
            logout_use_case=self.logout_user_use_case,
            resolve_session_use_case=self.resolve_session_use_case,
            cookies=self.session_cookies,
        )

    @cached_property
    def tasks_controller(self) -> TasksController:
        return TasksController(
            session=self.request_session,
            list_use_case=ListTasksUseCase(tasks=self.store),
            get_use_case=GetTaskUseCase(tasks=self.store),
            create_use_case=CreateTaskUseCase(tasks=self.store),
            update_use_case=UpdateTaskUseCase(tasks=self.store),
            delete_use_case=DeleteTaskUseCase(tasks=self.store),
            summary_use_case=SummarizeTasksUseCase(tasks=self.store),
        )

    @cached_property
    def misc_controller(self) -> MiscController:
        return MiscController(store=self.store)
