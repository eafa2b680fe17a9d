# countrymgr/schemas/country_schemas.py
from typing import Optional

from pydantic import BaseModel, Field, ValidationError as PydanticValidationError, field_validator

from countrymgr.core.errors import ValidationError
from countrymgr.infra.db.models.country import NAME_MAX_LENGTH, Country, new_country


class CountryInput(BaseModel):
    """Registro completo tal como lo captura la consola, antes de persistirlo."""

    code: str = Field(..., min_length=1, max_length=3)
    name: str = Field(..., max_length=NAME_MAX_LENGTH)
    internet_users: Optional[float] = Field(default=None, ge=0, le=100, allow_inf_nan=False)
    adult_literacy_rate: Optional[float] = Field(default=None, ge=0, le=100, allow_inf_nan=False)

    @field_validator("code", mode="before")
    @classmethod
    def code_upper(cls, v):
        return v.strip().upper() if isinstance(v, str) else v

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v: str) -> str:
        v = " ".join(v.split())
        if not v:
            raise ValueError("name cannot be empty")
        return v

    def to_country(self) -> Country:
        return new_country(
            self.code,
            self.name,
            internet_users=self.internet_users,
            adult_literacy_rate=self.adult_literacy_rate,
        )


def build_country(**fields) -> Country:
    """Valida los campos con CountryInput y devuelve la entidad lista para guardar."""
    try:
        return CountryInput(**fields).to_country()
    except PydanticValidationError as e:
        detalles = "; ".join(
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()
        )
        raise ValidationError(f"Invalid country data ({detalles})") from e
