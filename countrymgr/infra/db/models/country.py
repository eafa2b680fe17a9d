# countrymgr/infra/db/models/country.py
from sqlalchemy import Column, Float, String

from countrymgr.infra.db.base import Base

NAME_MAX_LENGTH = 120


class Country(Base):
    __tablename__ = "country"

    code = Column(String(3), primary_key=True)      # USA
    name = Column(String(NAME_MAX_LENGTH), nullable=False)

    # Porcentajes; NULL significa "desconocido"
    internet_users = Column(Float, nullable=True)
    adult_literacy_rate = Column(Float, nullable=True)

    def __repr__(self) -> str:
        return (
            f"Country(code={self.code!r}, name={self.name!r}, "
            f"internet_users={self.internet_users!r}, "
            f"adult_literacy_rate={self.adult_literacy_rate!r})"
        )


def new_country(
    code: str,
    name: str,
    internet_users: float | None = None,
    adult_literacy_rate: float | None = None,
) -> Country:
    return Country(
        code=code,
        name=name,
        internet_users=internet_users,
        adult_literacy_rate=adult_literacy_rate,
    )
