"""
export.py — CSV download of the derived division table.

Format (header first, one row per drawable division, "\\n"-terminated):

    Division,Members,Foil Total,Epee Total,Saber Total
    New Jersey,1648,191,271,227
    ...

The placeholder division is left out, matching what the map shows.
"""

import csv
import io
from typing import Iterable

from fencemap.models.division import DerivedDivision

EXPORT_FILENAME = "fencing-divisions.csv"
EXPORT_HEADER = ("Division", "Members", "Foil Total", "Epee Total", "Saber Total")


def export_rows(divisions: Iterable[DerivedDivision]) -> list[tuple]:
    return [
        (d.name, d.members, d.total_foil, d.total_epee, d.total_saber)
        for d in divisions
        if not d.is_placeholder
    ]


def divisions_to_csv(divisions: Iterable[DerivedDivision]) -> str:
    buf = io.StringIO()
    writer = csv.writer(buf, lineterminator="\n")
    writer.writerow(EXPORT_HEADER)
    writer.writerows(export_rows(divisions))
    return buf.getvalue()
