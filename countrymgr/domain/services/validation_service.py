# countrymgr/domain/services/validation_service.py
import math
import re
from typing import Optional, Protocol

from countrymgr.core.errors import DuplicateKeyError, NotFoundError, ValidationError
from countrymgr.infra.db.models.country import NAME_MAX_LENGTH

_STRICT_CODE = re.compile(r"[A-Z]{3}")

PERCENT_MIN = 0.0
PERCENT_MAX = 100.0


class CountryLookup(Protocol):
    def exists(self, code: str) -> bool: ...


def normalize_country_code(raw: str | None) -> str:
    return (raw or "").strip().upper()


def check_country_code_format(code: str, policy: str = "strict") -> None:
    """
    strict: exactamente 3 letras ASCII (ISO 3166-1 alpha-3).
    length: no vacío y máximo 3 caracteres.
    """
    if not code:
        raise ValidationError("Country code cannot be empty.")
    if len(code) > 3:
        raise ValidationError("Country code cannot exceed 3 characters.")
    if policy == "strict" and not _STRICT_CODE.fullmatch(code):
        raise ValidationError("Country code must be exactly 3 letters (A-Z).")


def validate_country_code(
    raw: str | None,
    must_exist: bool,
    repository: CountryLookup,
    policy: str = "strict",
) -> str:
    """Normaliza y valida un código; revisa además si existe o no en la base."""
    code = normalize_country_code(raw)
    check_country_code_format(code, policy)

    exists = repository.exists(code)
    if must_exist and not exists:
        raise NotFoundError(code)
    if not must_exist and exists:
        raise DuplicateKeyError(code)
    return code


def parse_optional_percentage(raw: str | None) -> Optional[float]:
    """Vacío -> None (desconocido). Cualquier otro texto debe ser un número entre 0 y 100."""
    if raw is None or not raw.strip():
        return None

    try:
        value = float(raw.strip())
    except ValueError:
        raise ValidationError(
            "Invalid input. Please enter a valid number or leave blank if unknown."
        ) from None

    if math.isnan(value) or math.isinf(value):
        raise ValidationError("Invalid input. Please enter a finite number.")
    if not PERCENT_MIN <= value <= PERCENT_MAX:
        raise ValidationError("Percentage must be between 0 and 100.")
    # "-0" se guarda como 0.0
    return value + 0.0


def capitalize_words(raw: str | None) -> str | None:
    if not raw:
        return raw
    return " ".join(word[:1].upper() + word[1:].lower() for word in raw.split())


def require_name(raw: str | None) -> str:
    name = " ".join((raw or "").split())
    if not name:
        raise ValidationError("Country name cannot be empty.")
    if len(name) > NAME_MAX_LENGTH:
        raise ValidationError(f"Country name cannot exceed {NAME_MAX_LENGTH} characters.")
    return name
