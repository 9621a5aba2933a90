from collections import Counter

from jsusage.model import ScanSummary
from jsusage.summarize import REPORT_HEADER, format_report, sort_stats


def test_sort_is_descending_and_stable():
	stats = Counter()
	stats["a"] = 3
	stats["b"] = 5
	stats["c"] = 5
	assert [label for label, _ in sort_stats(stats)] == ["b", "c", "a"]


def test_format_report():
	stats = Counter({"map": 2, "=>": 4})
	report = format_report(stats, ScanSummary(analyzed=2, skipped=1, failed=0))
	lines = report.splitlines()
	assert lines[0] == REPORT_HEADER
	assert "2 files analyzed, 1 skipped, 0 failed" in lines[1]
	assert lines[2:] == ["  =>: 4", "  map: 2"]


def test_format_empty_report():
	assert format_report(Counter()).splitlines() == [REPORT_HEADER, "  no matches"]
