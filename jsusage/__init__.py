"""Counts built-in function calls and keywords across TypeScript and Vue sources.

Modules:
- fs_scan.py: Filesystem walking, extension and path filters.
- ast_parse.py: Script extraction, tree-sitter parsing and node facts.
- rules.py: The fixed vocabulary and the counting rules.
- analyze.py: Per-file and per-project analysis into a counter table.
- model.py: Data structures for files, node facts and scan summaries.
- summarize.py: Frequency-sorted console report.
"""

__all__ = [
	"fs_scan",
	"ast_parse",
	"rules",
	"analyze",
	"model",
	"summarize",
]
