# countrymgr/main.py
import logging
import sys

from countrymgr.cli.controller import CountryController
from countrymgr.core.config import Settings, settings
from countrymgr.core.errors import StoreUnavailableError
from countrymgr.core.logging import setup_logging
from countrymgr.infra.db.repositories.country_repository import CountryRepository
from countrymgr.infra.db.session import StoreClient

logger = logging.getLogger(__name__)


def main(config: Settings | None = None) -> int:
    config = config or settings
    setup_logging(config)
    logger.info(f"🚀 {config.PROJECT_NAME} {config.PROJECT_VERSION} iniciado")

    store = None
    try:
        store = StoreClient.from_settings(config)
        store.init_db()
        controller = CountryController(CountryRepository(store), config)
        controller.run()
    except StoreUnavailableError as e:
        logger.error(f"❌ Base de datos no disponible: {e}")
        print("Database unavailable. Exiting.", file=sys.stderr)
        return 1
    finally:
        if store is not None:
            store.dispose()

    logger.info(f"🛑 {config.PROJECT_NAME} finalizado")
    return 0


if __name__ == "__main__":
    sys.exit(main())
