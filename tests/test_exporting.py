import csv
import json

from src.core.models import Occurrence
from src.core.result_schema import load_results
from src.ui.exporting import CSV_HEADER, export_occurrences_csv, export_occurrences_json


OCCS = [
    Occurrence("/repo/a.ts", 1, 12, "你好"),
    Occurrence("/repo/b.tsx", 3, 5, "按钮, \"引号\""),
]


def test_export_csv_writes_header_and_rows(tmp_path):
    out = tmp_path / "results.csv"

    rows = export_occurrences_csv(occurrences=OCCS, out_path=str(out))

    assert rows == 2
    raw = out.read_bytes()
    assert raw.startswith(b"\xef\xbb\xbf")
    with open(out, "r", encoding="utf-8-sig", newline="") as f:
        data = list(csv.reader(f))
    assert data[0] == CSV_HEADER
    assert data[1] == ["/repo/a.ts", "1", "12", "你好"]
    assert data[2] == ["/repo/b.tsx", "3", "5", "按钮, \"引号\""]


def test_export_csv_with_no_results_writes_header_only(tmp_path):
    out = tmp_path / "empty.csv"
    assert export_occurrences_csv(occurrences=[], out_path=str(out)) == 0
    with open(out, "r", encoding="utf-8-sig", newline="") as f:
        assert list(csv.reader(f)) == [CSV_HEADER]


def test_export_json_is_readable_by_load_results(tmp_path):
    out = tmp_path / "results.json"

    count = export_occurrences_json(occurrences=OCCS, out_path=str(out), path="/repo", exclude="dist")

    assert count == 2
    text = out.read_text(encoding="utf-8")
    # Chinese is written as-is, not \u-escaped.
    assert "你好" in text
    payload = json.loads(text)
    assert payload["meta"]["path"] == "/repo"
    assert payload["meta"]["exclude"] == "dist"
    assert load_results(payload) == OCCS
