"""
https://python-dependency-injector.ets-labs.org/index.html
https://python-dependency-injector.ets-labs.org/examples/fastapi-sqlalchemy.html
"""

from dependency_injector import containers, providers

from src.platform.config.core_setting import Settings
from src.platform.database.orm_db_setting import Database
from src.platform.database.unit_of_work import SqlAlchemyUnitOfWork
from src.service.ticketing.driven_adapter.repo.admin_user_command_repo_impl import (
    AdminUserCommandRepoImpl,
)
from src.service.ticketing.driven_adapter.repo.admin_user_query_repo_impl import (
    AdminUserQueryRepoImpl,
)
from src.service.ticketing.driven_adapter.repo.booking_query_repo_impl import BookingQueryRepoImpl
from src.service.ticketing.driven_adapter.repo.event_query_repo_impl import EventQueryRepoImpl
from src.service.ticketing.driven_adapter.security.bcrypt_password_hasher import (
    BcryptPasswordHasher,
)
from src.service.ticketing.driving_adapter.http_controller.auth.jwt_auth import JwtAuth


class Container(containers.DeclarativeContainer):
    # Configuration
    config_service = providers.Singleton(Settings)

    # Database (one engine + bounded pool per process)
    database = providers.Singleton(Database)

    # Unit of Work: a new instance per request, all command repos share its session
    unit_of_work = providers.Factory(
        SqlAlchemyUnitOfWork, session_factory=database.provided.session
    )

    # Read repositories (stateless - use session_factory per call)
    booking_query_repo = providers.Singleton(
        BookingQueryRepoImpl, session_factory=database.provided.session
    )
    event_query_repo = providers.Singleton(
        EventQueryRepoImpl, session_factory=database.provided.session
    )
    admin_user_query_repo = providers.Singleton(
        AdminUserQueryRepoImpl, session_factory=database.provided.session
    )
    admin_user_command_repo = providers.Singleton(
        AdminUserCommandRepoImpl, session_factory=database.provided.session
    )

    # Auth services
    password_hasher = providers.Singleton(BcryptPasswordHasher)
    jwt_auth = providers.Singleton(JwtAuth)


container = Container()


def cleanup() -> None:
    container.reset_singletons()
