from dependency_injector import containers, providers

from wealthtrack.config import Settings
from wealthtrack.db.session import build_engine, build_session_factory


class Container(containers.DeclarativeContainer):
    """Process-wide singletons; the API lifespan may override ``settings``."""

    wiring_config = containers.WiringConfiguration(modules=["wealthtrack.api.deps"])

    settings = providers.Singleton(Settings)

    engine = providers.Singleton(
        build_engine,
        database_url=settings.provided.database_url,
        echo=settings.provided.sql_echo,
    )

    session_factory = providers.Singleton(build_session_factory, engine=engine)
