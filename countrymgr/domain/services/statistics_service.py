# countrymgr/domain/services/statistics_service.py
from typing import Callable, Dict, Iterable, Optional

from countrymgr.domain.entities.statistics import FieldStats
from countrymgr.infra.db.models.country import Country

FieldAccessor = Callable[[Country], Optional[float]]

COUNTRY_FIELDS: Dict[str, FieldAccessor] = {
    "Internet Users (%)": lambda c: c.internet_users,
    "Adult Literacy Rate (%)": lambda c: c.adult_literacy_rate,
}


def compute_field_stats(records: Iterable[Country], accessor: FieldAccessor) -> FieldStats:
    """Máximo, mínimo y promedio de un campo, ignorando los registros con NULL."""
    valores = [(c, accessor(c)) for c in records]
    valores = [(c, float(v)) for c, v in valores if v is not None]

    if not valores:
        return FieldStats(maximum=None, minimum=None, average=None)

    return FieldStats(
        maximum=max(valores, key=lambda par: par[1]),
        minimum=min(valores, key=lambda par: par[1]),
        average=sum(v for _, v in valores) / len(valores),
    )


def compute_country_statistics(records: Iterable[Country]) -> Dict[str, FieldStats]:
    countries = list(records)
    return {label: compute_field_stats(countries, accessor) for label, accessor in COUNTRY_FIELDS.items()}
