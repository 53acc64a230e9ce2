"""Application entry point and composition root."""

import logging

from falcon.asgi import App

from projectguard import __version__
from projectguard.application.access import (
    AccessDeniedRecorder,
    AccessGuard,
    ResourceAccessValidator,
)
from projectguard.application.use_cases.resolve_viewer import ResolveViewerUseCase
from projectguard.config import Settings, get_settings
from projectguard.infrastructure.audit.audit_sink import UnitOfWorkAuditSink
from projectguard.infrastructure.auth.keycloak_provider import KeycloakProvider
from projectguard.infrastructure.persistence.postgres.connection import create_pool
from projectguard.infrastructure.persistence.postgres.unit_of_work import (
    create_uow_factory,
)
from projectguard.interfaces.api.app import create_app
from projectguard.interfaces.api.middleware import (
    AuthMiddleware,
    CORSMiddleware,
    PoolLifespanMiddleware,
)

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else settings.log_level.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def create_projectguard_app(settings: Settings | None = None) -> App:
    """Composition root - build Falcon app with all dependencies."""
    settings = settings or get_settings()
    configure_logging(settings)

    pool = create_pool(
        settings.database_url,
        min_size=settings.database_pool_min_size,
        max_size=settings.database_pool_max_size,
    )
    uow_factory = create_uow_factory(pool)

    keycloak = (
        KeycloakProvider(
            server_url=settings.keycloak_url,
            realm=settings.keycloak_realm,
            client_id=settings.keycloak_client_id,
            client_secret=settings.keycloak_client_secret,
        )
        if settings.keycloak_client_secret
        else None
    )
    if keycloak is None:
        logger.warning("KEYCLOAK_CLIENT_SECRET not set; every request is unauthenticated")
    resolve_viewer = (
        ResolveViewerUseCase(unit_of_work_factory=uow_factory, identity_provider=keycloak)
        if keycloak
        else None
    )

    recorder = AccessDeniedRecorder(UnitOfWorkAuditSink(uow_factory))
    access_guard = AccessGuard(recorder)
    access_validator = ResourceAccessValidator(
        unit_of_work_factory=uow_factory,
        recorder=recorder,
        legacy_manager_name_match=settings.legacy_manager_name_match,
    )

    app = create_app(
        unit_of_work_factory=uow_factory,
        access_guard=access_guard,
        access_validator=access_validator,
        middleware=[
            CORSMiddleware(settings.cors_origin_list),
            PoolLifespanMiddleware(pool),
            AuthMiddleware(resolve_viewer),
        ],
    )
    logger.info("projectguard v%s (%s)", __version__, settings.environment)
    return app


def main() -> None:
    """CLI entry point - run uvicorn server."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(create_projectguard_app(settings), host=settings.host, port=settings.port)
