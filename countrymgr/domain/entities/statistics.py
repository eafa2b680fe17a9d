# countrymgr/domain/entities/statistics.py
from dataclasses import dataclass
from typing import Optional, Tuple

from countrymgr.infra.db.models.country import Country


@dataclass(frozen=True)
class FieldStats:
    maximum: Optional[Tuple[Country, float]]
    minimum: Optional[Tuple[Country, float]]
    average: Optional[float]

    @property
    def has_data(self) -> bool:
        return self.maximum is not None and self.minimum is not None
