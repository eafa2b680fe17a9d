# countrymgr/cli/rendering.py
from typing import Dict, Iterable, List, Optional

from countrymgr.domain.entities.statistics import FieldStats
from countrymgr.infra.db.models.country import Country

RULE = "-" * 82
ROW_FORMAT = "{:<10} {:<30} {:<20} {:<20}"
HEADERS = ("CODE", "NAME", "INTERNET USERS (%)", "ADULT LITERACY RATE (%)")


def format_percentage(value: Optional[float]) -> str:
    return f"{value:.2f}" if value is not None else "--"


def render_row(country: Country) -> str:
    return ROW_FORMAT.format(
        country.code,
        country.name,
        format_percentage(country.internet_users),
        format_percentage(country.adult_literacy_rate),
    )


def render_table(countries: Iterable[Country]) -> List[str]:
    lines = [
        RULE,
        "COUNTRY DATA".center(len(RULE)).rstrip(),
        RULE,
        ROW_FORMAT.format(*HEADERS),
        RULE,
    ]
    rows = [render_row(c) for c in countries]
    if not rows:
        rows = ["No countries found."]
    return lines + rows


def render_field_stats(label: str, stats: FieldStats) -> List[str]:
    lines = [f"{label}:"]
    if stats.has_data:
        max_country, max_value = stats.maximum
        min_country, min_value = stats.minimum
        lines.append(f" Maximum: {max_country.name} - {max_value:.2f}%")
        lines.append(f" Minimum: {min_country.name} - {min_value:.2f}%")
    else:
        lines.append(" No data available.")

    if stats.average is not None:
        lines.append(f" Average: {stats.average:.2f}%")
    else:
        lines.append(" Average: --")
    return lines


def render_statistics(report: Dict[str, FieldStats]) -> List[str]:
    lines = ["", "========= Statistics =========", ""]
    for i, (label, stats) in enumerate(report.items()):
        if i:
            lines.append("")
        lines.extend(render_field_stats(label, stats))
    return lines
