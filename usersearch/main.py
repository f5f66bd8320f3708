"""Application entrypoint."""

from __future__ import annotations

import uvicorn

from usersearch.api import create_app
from usersearch.config import get_settings
from usersearch.logging import configure_logging, logger
from usersearch.services.exceptions import RecordSourceError
from usersearch.services.records import RecordStore


def main() -> None:
    configure_logging()
    settings = get_settings()
    store = RecordStore(settings.server.dataset_path)
    # Load before serving; a failure here is retried by the first request and reported as 500.
    try:
        store.all()
    except RecordSourceError as exc:
        logger.error("record_source_preload_failed", error=str(exc))
    app = create_app(store)

    logger.info(
        "server_starting",
        environment=settings.environment,
        host=settings.server.host,
        port=settings.server.port,
        dataset=settings.server.dataset_path,
    )
    uvicorn.run(app, host=settings.server.host, port=settings.server.port, log_config=None)


if __name__ == "__main__":
    main()
