# countrymgr/infra/db/repositories/country_repository.py
import logging
from contextlib import contextmanager
from typing import Iterator, List, Optional

from sqlalchemy import select
from sqlalchemy.exc import DBAPIError, IntegrityError
from sqlalchemy.orm import Session

from countrymgr.core.errors import DuplicateKeyError, NotFoundError, StoreUnavailableError
from countrymgr.infra.db.models.country import Country
from countrymgr.infra.db.session import StoreClient

logger = logging.getLogger(__name__)


class CountryRepository:
    """
    Acceso a la tabla country. Cada operación abre su propia unidad de
    trabajo (sesión + transacción) y la cierra al salir, con o sin error.
    Los objetos devueltos quedan desligados de la sesión.
    """

    def __init__(self, store: StoreClient):
        self.store = store

    @contextmanager
    def _unit_of_work(self) -> Iterator[Session]:
        try:
            with self.store.session() as db:
                yield db
        except IntegrityError:
            raise
        except DBAPIError as e:
            logger.debug(f"Error de base de datos: {e}")
            raise StoreUnavailableError(f"Database error: {e}") from e

    def create(self, country: Country) -> Country:
        try:
            with self._unit_of_work() as db:
                if db.get(Country, country.code) is not None:
                    raise DuplicateKeyError(country.code)
                db.add(country)
        except IntegrityError as e:
            raise DuplicateKeyError(country.code) from e

        logger.info(f"País creado: {country.code}")
        return country

    def find_by_code(self, code: str) -> Optional[Country]:
        with self._unit_of_work() as db:
            country = db.get(Country, code)
        logger.debug(f"Búsqueda {code}: {'encontrado' if country else 'no existe'}")
        return country

    def exists(self, code: str) -> bool:
        return self.find_by_code(code) is not None

    def find_all(self) -> List[Country]:
        with self._unit_of_work() as db:
            countries = list(db.execute(select(Country)).scalars().all())
        logger.debug(f"{len(countries)} países leídos")
        return countries

    def update(self, country: Country) -> Country:
        with self._unit_of_work() as db:
            current = db.get(Country, country.code)
            if current is None:
                raise NotFoundError(country.code)
            current.name = country.name
            current.internet_users = country.internet_users
            current.adult_literacy_rate = country.adult_literacy_rate

        logger.info(f"País actualizado: {country.code}")
        return current

    def delete(self, country: Country) -> None:
        with self._unit_of_work() as db:
            current = db.get(Country, country.code)
            if current is None:
                raise NotFoundError(country.code)
            db.delete(current)

        logger.info(f"País eliminado: {country.code}")
