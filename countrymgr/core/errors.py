# countrymgr/core/errors.py


class CountryManagerError(Exception):
    """Base de todos los errores de la aplicación."""


class ValidationError(CountryManagerError):
    """Entrada mal formada (código, porcentaje, nombre). Se corrige volviendo a preguntar."""


class NotFoundError(CountryManagerError):
    def __init__(self, code: str):
        self.code = code
        super().__init__(f"Country with code {code} not found.")


class DuplicateKeyError(CountryManagerError):
    def __init__(self, code: str):
        self.code = code
        super().__init__(f"Country with code {code} already exists.")


class StoreUnavailableError(CountryManagerError):
    """La base de datos no responde. Es fatal para el proceso."""
