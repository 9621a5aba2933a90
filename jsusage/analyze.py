from __future__ import annotations

import logging
import os
from collections import Counter
from typing import Optional, Tuple

from .ast_parse import ParseError, extract_facts, extract_script_from_vue
from .fs_scan import detect_language, is_excluded, scan_repository
from .model import ScanSummary
from .rules import count_facts


logger = logging.getLogger(__name__)

ANALYZED = "analyzed"
SKIPPED = "skipped"
FAILED = "failed"


def read_script(path: str, language: str) -> str:
	with open(path, "r", encoding="utf-8") as fh:
		text = fh.read()
	if language == "vue":
		return extract_script_from_vue(text)
	return text


def analyze_file(
	path: str,
	stats: Counter,
	rel_path: Optional[str] = None,
	language: Optional[str] = None,
) -> str:
	"""Count vocabulary and keyword usage of one file into ``stats``.

	Exclusions are matched against ``rel_path`` when given, else ``path``.
	``analyze_project`` passes the path relative to the scan root, so a
	``config`` or ``main`` in the root directory itself does not exclude
	every file; matching against the full joined path would.
	``language`` defaults to what ``detect_language`` reports for ``path``.
	Returns one of ``"analyzed"``, ``"skipped"`` or ``"failed"``.
	"""
	if language is None:
		language = detect_language(path)
	if language == "unknown":
		logger.debug("Skipping %s: extension not analyzed", path)
		return SKIPPED
	if is_excluded(rel_path if rel_path is not None else path):
		logger.debug("Skipping %s: excluded path", path)
		return SKIPPED

	try:
		facts = extract_facts(read_script(path, language))
	except (OSError, UnicodeDecodeError, ParseError) as e:
		logger.warning("Failed to analyze %s: %s", path, e)
		return FAILED

	count_facts(facts, stats)
	return ANALYZED


def analyze_project(root: str, stats: Optional[Counter] = None) -> Tuple[Counter, ScanSummary]:
	if stats is None:
		stats = Counter()
	summary = ScanSummary()
	for f in scan_repository(os.path.abspath(root)):
		outcome = analyze_file(f.path, stats, rel_path=f.rel_path, language=f.language)
		if outcome == ANALYZED:
			summary.analyzed += 1
		elif outcome == SKIPPED:
			summary.skipped += 1
		else:
			summary.failed += 1
	logger.info(
		"Scanned %s files under %s: %s analyzed, %s skipped, %s failed",
		summary.total,
		root,
		summary.analyzed,
		summary.skipped,
		summary.failed,
	)
	return stats, summary
