"""Application entry point and composition root."""

import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from functools import partial

import falcon.asgi

from recordkeeper.application.ports import Clock, ContentStore
from recordkeeper.application.use_cases.legal_hold.place_legal_hold import (
    PlaceLegalHoldUseCase,
)
from recordkeeper.application.use_cases.legal_hold.release_legal_hold import (
    ReleaseLegalHoldUseCase,
)
from recordkeeper.application.use_cases.record.dispose_expired_records import (
    DisposeExpiredRecordsUseCase,
)
from recordkeeper.application.use_cases.record.get_record import GetRecordUseCase
from recordkeeper.application.use_cases.record.get_record_stats import GetRecordStatsUseCase
from recordkeeper.application.use_cases.record.get_verification_history import (
    GetVerificationHistoryUseCase,
)
from recordkeeper.application.use_cases.record.list_records import ListRecordsUseCase
from recordkeeper.application.use_cases.record.verify_all_records import (
    VerifyAllRecordsUseCase,
)
from recordkeeper.application.use_cases.record.verify_record import VerifyRecordUseCase
from recordkeeper.config import Settings, get_settings
from recordkeeper.infrastructure.clock import SystemClock
from recordkeeper.infrastructure.persistence.postgres.connection import create_pool, ping
from recordkeeper.infrastructure.persistence.postgres.unit_of_work import create_uow_factory
from recordkeeper.infrastructure.storage.filesystem_store import FileSystemContentStore
from recordkeeper.interfaces.api.middleware.actor import ActorMiddleware
from recordkeeper.interfaces.api.middleware.cors import CORSMiddleware
from recordkeeper.interfaces.api.middleware.pool_lifespan import PoolLifespanMiddleware
from recordkeeper.interfaces.api.resources.health import HealthResource
from recordkeeper.interfaces.api.resources.records import (
    DisposeExpiredResource,
    LegalHoldResource,
    RecordResource,
    RecordsResource,
    RecordStatsResource,
    RecordVerifyResource,
    VerifyAllResource,
)

logger = logging.getLogger(__name__)


@dataclass
class RecordServices:
    """Use cases wired against one store, content store and clock."""

    verify_record: VerifyRecordUseCase
    verify_all: VerifyAllRecordsUseCase
    dispose_expired: DisposeExpiredRecordsUseCase
    get_stats: GetRecordStatsUseCase
    get_history: GetVerificationHistoryUseCase
    list_records: ListRecordsUseCase
    get_record: GetRecordUseCase
    place_legal_hold: PlaceLegalHoldUseCase
    release_legal_hold: ReleaseLegalHoldUseCase


def configure_logging(level: str) -> None:
    """Configure root logger for CLI and server processes."""
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def build_record_services(
    unit_of_work_factory: type,
    content_store: ContentStore,
    clock: Clock,
    settings: Settings,
) -> RecordServices:
    """Wire use cases against the given collaborators."""
    verify_record = VerifyRecordUseCase(
        unit_of_work_factory=unit_of_work_factory,
        content_store=content_store,
        clock=clock,
    )
    return RecordServices(
        verify_record=verify_record,
        verify_all=VerifyAllRecordsUseCase(
            unit_of_work_factory=unit_of_work_factory,
            verify_record=verify_record,
            concurrency=settings.verify_concurrency,
        ),
        dispose_expired=DisposeExpiredRecordsUseCase(
            unit_of_work_factory=unit_of_work_factory,
            content_store=content_store,
            clock=clock,
            delete_content=settings.delete_content_on_disposal,
        ),
        get_stats=GetRecordStatsUseCase(unit_of_work_factory=unit_of_work_factory, clock=clock),
        get_history=GetVerificationHistoryUseCase(unit_of_work_factory=unit_of_work_factory),
        list_records=ListRecordsUseCase(unit_of_work_factory=unit_of_work_factory),
        get_record=GetRecordUseCase(unit_of_work_factory=unit_of_work_factory),
        place_legal_hold=PlaceLegalHoldUseCase(
            unit_of_work_factory=unit_of_work_factory, clock=clock
        ),
        release_legal_hold=ReleaseLegalHoldUseCase(unit_of_work_factory=unit_of_work_factory),
    )


def add_routes(
    app: falcon.asgi.App,
    services: RecordServices,
    ready_check: Callable[[], Awaitable[None]] | None = None,
) -> None:
    """Register health and record routes."""
    health_resource = HealthResource(ready_check)
    app.add_route("/v1/health", health_resource)
    app.add_route("/v1/health/ready", health_resource, suffix="ready")
    app.add_route("/v1/records", RecordsResource(services.list_records))
    app.add_route("/v1/records/stats", RecordStatsResource(services.get_stats))
    app.add_route("/v1/records/verify-all", VerifyAllResource(services.verify_all))
    app.add_route("/v1/records/dispose-expired", DisposeExpiredResource(services.dispose_expired))
    app.add_route("/v1/records/{record_id}", RecordResource(services.get_record))
    app.add_route("/v1/records/{record_id}/verify", RecordVerifyResource(services.verify_record))
    app.add_route(
        "/v1/records/{record_id}/legal-hold",
        LegalHoldResource(services.place_legal_hold, services.release_legal_hold),
    )


def create_recordkeeper_app() -> falcon.asgi.App:
    """Composition root - build Falcon app with all dependencies."""
    settings = get_settings()
    configure_logging(settings.log_level)
    pool = create_pool(
        settings.database_url,
        min_size=settings.pool_min_size,
        max_size=settings.pool_max_size,
    )
    services = build_record_services(
        unit_of_work_factory=create_uow_factory(pool),
        content_store=FileSystemContentStore(settings.archive_dir),
        clock=SystemClock(),
        settings=settings,
    )

    cors_origins = [o.strip() for o in settings.cors_origins.split(",") if o.strip()]
    app = falcon.asgi.App(
        middleware=[
            CORSMiddleware(cors_origins),
            PoolLifespanMiddleware(pool),
            ActorMiddleware(settings.default_actor),
        ],
    )

    async def log_exception(req, resp, ex, params):
        logger.exception("Unhandled error on %s %s", req.method, req.path)
        resp.status = falcon.HTTP_500
        resp.media = {"title": "500 Internal Server Error"}

    app.add_error_handler(Exception, log_exception)
    add_routes(app, services, ready_check=partial(ping, pool))
    return app


def main() -> None:
    """Serve the admin API with uvicorn."""
    import uvicorn

    uvicorn.run(
        "recordkeeper.main:create_recordkeeper_app",
        factory=True,
        host="0.0.0.0",
        port=8000,
    )
