"""
https://python-dependency-injector.ets-labs.org/index.html
https://python-dependency-injector.ets-labs.org/examples/fastapi-sqlalchemy.html
"""

from dependency_injector import containers, providers

from src.platform.config.core_setting import Settings
from src.platform.database.orm_db_setting import Database
from src.service.clubverse.driven_adapter.notification.console_notifier import ConsoleNotifier
from src.service.clubverse.driven_adapter.notification.notification_dispatcher import (
    NotificationDispatcher,
)
from src.service.clubverse.driven_adapter.notification.smtp_notifier import SmtpNotifier
from src.service.clubverse.driven_adapter.repo.reservation_command_repo_impl import (
    ReservationCommandRepoImpl,
)
from src.service.clubverse.driven_adapter.repo.user_command_repo_impl import UserCommandRepoImpl
from src.service.clubverse.driven_adapter.repo.user_query_repo_impl import UserQueryRepoImpl
from src.service.clubverse.driven_adapter.security.bcrypt_password_hasher import (
    BcryptPasswordHasher,
)
from src.service.clubverse.driving_adapter.http_controller.auth.auth_gate import AuthGate
from src.service.clubverse.driving_adapter.http_controller.auth.jwt_auth import JwtAuth


class Container(containers.DeclarativeContainer):
    # Configuration
    config_service = providers.Singleton(Settings)

    # Database (engine created lazily on first session)
    database = providers.Singleton(
        Database,
        url=config_service.provided.DATABASE_URL_ASYNC,
        echo=config_service.provided.DB_ECHO,
        pool_pre_ping=config_service.provided.DB_POOL_PRE_PING,
    )

    # Repositories (stateless - use session_factory per-request)
    user_command_repo = providers.Singleton(
        UserCommandRepoImpl, session_factory=database.provided.session
    )
    user_query_repo = providers.Singleton(
        UserQueryRepoImpl, session_factory=database.provided.session
    )
    reservation_command_repo = providers.Singleton(
        ReservationCommandRepoImpl, session_factory=database.provided.session
    )

    # Auth
    password_hasher = providers.Singleton(
        BcryptPasswordHasher, rounds=config_service.provided.BCRYPT_ROUNDS
    )
    jwt_auth = providers.Singleton(
        JwtAuth,
        secret=config_service.provided.SECRET_KEY.get_secret_value.call(),
        algorithm=config_service.provided.ALGORITHM,
        expire_hours=config_service.provided.ACCESS_TOKEN_EXPIRE_HOURS,
    )
    auth_gate = providers.Singleton(
        AuthGate,
        jwt_auth=jwt_auth,
        user_query_repo=user_query_repo,
    )

    # Mail relay: EMAIL_BACKEND=console logs instead of sending
    notifier = providers.Selector(
        config_service.provided.EMAIL_BACKEND,
        smtp=providers.Singleton(
            SmtpNotifier,
            host=config_service.provided.SMTP_HOST,
            port=config_service.provided.SMTP_PORT,
            username=config_service.provided.EMAIL_USER,
            password=config_service.provided.EMAIL_PASSWORD.get_secret_value.call(),
            timeout=config_service.provided.SMTP_TIMEOUT,
        ),
        console=providers.Singleton(ConsoleNotifier),
    )

    # Fire-and-forget confirmations; drained by main.py lifespan on shutdown
    notification_dispatcher = providers.Singleton(NotificationDispatcher, notifier=notifier)


container = Container()
