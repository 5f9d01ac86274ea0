"""
test_export.py — CSV export and Top-N rankings.
"""

import csv
import io

from fencemap.models.metric import get_metric
from fencemap.services.export import EXPORT_HEADER, divisions_to_csv, export_rows
from fencemap.services.metrics import derive
from fencemap.services.rankings import top_divisions


class TestCsvExport:

    def test_header_first(self, divisions):
        first_line = divisions_to_csv(divisions).split("\n", 1)[0]
        assert first_line == "Division,Members,Foil Total,Epee Total,Saber Total"

    def test_placeholder_excluded(self, divisions):
        names = [row[0] for row in export_rows(divisions)]
        assert "None" not in names
        assert len(names) == len(divisions) - 1

    def test_row_values(self, divisions):
        lines = divisions_to_csv(divisions).split("\n")
        assert lines[1] == "New Jersey,1648,191,271,227"

    def test_newline_terminated(self, divisions):
        text = divisions_to_csv(divisions)
        assert text.endswith("\n")
        assert "\r" not in text

    def test_names_with_commas_are_quoted(self):
        text = divisions_to_csv([derive({"name": "Ark, La, Miss", "members": 2})])
        rows = list(csv.reader(io.StringIO(text)))
        assert rows == [list(EXPORT_HEADER), ["Ark, La, Miss", "2", "0", "0", "0"]]

    def test_empty_table_is_header_only(self):
        assert divisions_to_csv([]) == ",".join(EXPORT_HEADER) + "\n"


class TestTopDivisions:

    def test_top_five_by_members(self, divisions):
        top = top_divisions(divisions, get_metric("members"))
        assert [d.name for d in top] == [
            "New Jersey", "New England", "Southern California", "Virginia", "Metropolitan NYC",
        ]
        assert [d.rank for d in top] == [1, 2, 3, 4, 5]

    def test_placeholder_never_ranked(self, divisions):
        # "None" has the most members of any row
        top = top_divisions(divisions, get_metric("members"), limit=1)
        assert top[0].name == "New Jersey"

    def test_cards_use_metric_colour(self, divisions):
        top = top_divisions(divisions, get_metric("total_foil"))
        assert {d.color for d in top} == {"#2ca02c"}

    def test_most_popular_metric_reports_weapon(self, divisions):
        top = top_divisions(divisions, get_metric("most_popular_weapon"), limit=1)
        assert top[0].name == "New England"
        assert top[0].value == 282
        assert top[0].weapon == "Epee"

    def test_zero_values_skipped(self):
        rows = [derive({"name": "A", "members": 0}), derive({"name": "B", "members": 3})]
        top = top_divisions(rows, get_metric("members"))
        assert [d.name for d in top] == ["B"]

    def test_ties_keep_dataset_order(self):
        rows = [derive({"name": n, "members": 7}) for n in ("C", "A", "B")]
        assert [d.name for d in top_divisions(rows, get_metric("members"))] == ["C", "A", "B"]

    def test_limit(self, divisions):
        assert len(top_divisions(divisions, get_metric("members"), limit=12)) == 12
