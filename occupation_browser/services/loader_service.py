"""
Reads the ESCO occupations CSV export into Occupation records.
Missing columns and empty cells become empty strings.
"""
import csv
import io
import logging
from pathlib import Path
from typing import Iterable, Mapping

from occupation_browser.config import settings
from occupation_browser.schemas.occupation import Occupation

logger = logging.getLogger(__name__)

# Occupation field -> CSV header
CSV_COLUMNS = {
    "user_link": "User Link",
    "key_id": "Key ID",
    "isco_group_code": "ISCO GROUP CODE",
    "code": "CODE",
    "preferred_label": "PREFERRED LABEL",
    "alternate_designations": "Example Alternate Designation",
    "description": "Core Description",
    "isco_tax_included": "ISCO Tax Included",
    "definition": "DEFINITION",
    "scope_note": "SCOPE NOTE",
    "regulated_profession_note": "REGULATED PROFESSION NOTE",
    "occupation_type": "OCCUPATION TYPE",
    "status": "Status",
}


def parse_occupations(rows: Iterable[Mapping[str, str | None]]) -> list[Occupation]:
    return [
        Occupation(**{field: row.get(column) or "" for field, column in CSV_COLUMNS.items()})
        for row in rows
    ]


def read_occupations_csv(text: str) -> list[Occupation]:
    reader = csv.DictReader(io.StringIO(text.lstrip("\ufeff")), restkey="_extra")
    return parse_occupations(reader)


def load_occupations(path: Path | None = None) -> list[Occupation]:
    path = path or settings.data_path
    with open(path, newline="", encoding="utf-8-sig") as f:
        occupations = parse_occupations(csv.DictReader(f, restkey="_extra"))
    logger.info("Loaded %d occupations from %s", len(occupations), path)
    return occupations
