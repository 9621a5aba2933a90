from __future__ import annotations

from collections import Counter
from typing import List, Optional, Tuple

from .model import ScanSummary


REPORT_HEADER = "Usage statistics for JS functions and keywords in TypeScript/Vue sources:"


def sort_stats(stats: Counter) -> List[Tuple[str, int]]:
	# sorted() is stable, so equal counts keep their insertion order
	return sorted(stats.items(), key=lambda item: item[1], reverse=True)


def format_report(stats: Counter, summary: Optional[ScanSummary] = None) -> str:
	parts: List[str] = [REPORT_HEADER]
	if summary is not None:
		parts.append(
			f"  ({summary.analyzed} files analyzed, {summary.skipped} skipped, {summary.failed} failed)"
		)
	ranked = sort_stats(stats)
	if not ranked:
		parts.append("  no matches")
	for label, count in ranked:
		parts.append(f"  {label}: {count}")
	return "\n".join(parts)
