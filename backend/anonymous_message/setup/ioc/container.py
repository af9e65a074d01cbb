"""
Dishka DI Container Setup.

- Registers stores, repositories and command/query handlers
- Maps abstract ports to the in-memory implementations
- Exposes the active Config (PERSONAL_LINK_BASE_URL for UserDTO)
- Stores/repositories are Scope.APP (their state must outlive a request),
  handlers are Scope.REQUEST

Flow:
  Container → provides → InMemoryContactRepository → to → AddContactHandler
                                    ↓
                            uses ContactRepository port

Usage:
    container = await create_container()
    async with container() as request_container:
        handler = await request_container.get(AddContactHandler)
        contact = await handler.execute(AddContactCommand(...))
    await container.close()
"""

from typing import Optional

from dishka import AsyncContainer, Provider, Scope, make_async_container, provide

from anonymous_message.application.commands.auth import (
    LoginHandler,
    LogoutHandler,
    SignupHandler,
)
from anonymous_message.application.commands.contacts import (
    AddContactHandler,
    DeleteContactHandler,
    ForceDeleteContactHandler,
    UpdateContactHandler,
)
from anonymous_message.application.commands.messages import (
    AnswerMessageHandler,
    SendMessageHandler,
)
from anonymous_message.application.commands.users import UpdateUserProfileHandler
from anonymous_message.application.queries.contacts import FetchContactsHandler
from anonymous_message.application.queries.messages import FetchMessageHistoryHandler
from anonymous_message.application.queries.users import FetchUserProfileHandler
from anonymous_message.config.settings import Config
from anonymous_message.domain.ports.repositories import (
    AuthRepository,
    ContactRepository,
    MessageRepository,
    UserRepository,
)
from anonymous_message.infrastructure.memory import (
    InMemoryAuthRepository,
    InMemoryContactRepository,
    InMemoryMessageRepository,
    InMemoryUserRepository,
    InMemoryUserStore,
)


class AppProvider(Provider):
    """
    Application dependency provider.

    Registers all dependencies and their implementations.
    """

    def __init__(self, config: type[Config] = Config):
        super().__init__()
        self._config = config

    # ==================== CONFIG ====================

    @provide(scope=Scope.APP)
    def get_config(self) -> Config:
        return self._config()

    # ==================== STORES ====================

    @provide(scope=Scope.APP)
    def get_user_store(self) -> InMemoryUserStore:
        return InMemoryUserStore(hash_iterations=self._config.PASSWORD_HASH_ITERATIONS)

    # ==================== REPOSITORIES ====================

    @provide(scope=Scope.APP)
    def get_auth_repository(self, store: InMemoryUserStore) -> AuthRepository:
        """
        - Return type is ABSTRACT (AuthRepository)
        - Implementation is CONCRETE (InMemoryAuthRepository)
        """
        return InMemoryAuthRepository(
            store, max_login_attempts=self._config.MAX_LOGIN_ATTEMPTS
        )

    @provide(scope=Scope.APP)
    def get_user_repository(self, store: InMemoryUserStore) -> UserRepository:
        return InMemoryUserRepository(store)

    @provide(scope=Scope.APP)
    def get_contact_repository(self) -> ContactRepository:
        return InMemoryContactRepository()

    @provide(scope=Scope.APP)
    def get_message_repository(self) -> MessageRepository:
        return InMemoryMessageRepository()

    # ==================== AUTH HANDLERS ====================

    @provide(scope=Scope.REQUEST)
    def get_login_handler(self, auth_repository: AuthRepository) -> LoginHandler:
        return LoginHandler(auth_repository)

    @provide(scope=Scope.REQUEST)
    def get_signup_handler(self, auth_repository: AuthRepository) -> SignupHandler:
        return SignupHandler(auth_repository)

    @provide(scope=Scope.REQUEST)
    def get_logout_handler(self, auth_repository: AuthRepository) -> LogoutHandler:
        return LogoutHandler(auth_repository)

    # ==================== CONTACT HANDLERS ====================

    @provide(scope=Scope.REQUEST)
    def get_add_contact_handler(
        self, contact_repository: ContactRepository
    ) -> AddContactHandler:
        return AddContactHandler(contact_repository)

    @provide(scope=Scope.REQUEST)
    def get_delete_contact_handler(
        self, contact_repository: ContactRepository
    ) -> DeleteContactHandler:
        return DeleteContactHandler(contact_repository)

    @provide(scope=Scope.REQUEST)
    def get_force_delete_contact_handler(
        self, contact_repository: ContactRepository
    ) -> ForceDeleteContactHandler:
        return ForceDeleteContactHandler(contact_repository)

    @provide(scope=Scope.REQUEST)
    def get_update_contact_handler(
        self, contact_repository: ContactRepository
    ) -> UpdateContactHandler:
        return UpdateContactHandler(contact_repository)

    @provide(scope=Scope.REQUEST)
    def get_fetch_contacts_handler(
        self, contact_repository: ContactRepository
    ) -> FetchContactsHandler:
        return FetchContactsHandler(contact_repository)

    # ==================== MESSAGE HANDLERS ====================

    @provide(scope=Scope.REQUEST)
    def get_send_message_handler(
        self,
        message_repository: MessageRepository,
        contact_repository: ContactRepository,
    ) -> SendMessageHandler:
        return SendMessageHandler(
            message_repository=message_repository,
            contact_repository=contact_repository,
        )

    @provide(scope=Scope.REQUEST)
    def get_answer_message_handler(
        self, message_repository: MessageRepository
    ) -> AnswerMessageHandler:
        return AnswerMessageHandler(message_repository)

    @provide(scope=Scope.REQUEST)
    def get_fetch_message_history_handler(
        self, message_repository: MessageRepository
    ) -> FetchMessageHistoryHandler:
        return FetchMessageHistoryHandler(message_repository)

    # ==================== USER HANDLERS ====================

    @provide(scope=Scope.REQUEST)
    def get_fetch_user_profile_handler(
        self, user_repository: UserRepository
    ) -> FetchUserProfileHandler:
        return FetchUserProfileHandler(user_repository)

    @provide(scope=Scope.REQUEST)
    def get_update_user_profile_handler(
        self, user_repository: UserRepository
    ) -> UpdateUserProfileHandler:
        return UpdateUserProfileHandler(user_repository)


async def create_container(config: Optional[type[Config]] = None) -> AsyncContainer:
    """
    Create and configure the DI container.

    - make_async_container() creates the container with all providers
    - Call this ONCE at app startup
    """
    return make_async_container(AppProvider(config or Config))
