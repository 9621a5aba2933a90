from __future__ import annotations

import os
from typing import Dict, List, Tuple

from .model import FileInfo


EXTENSION_LANGUAGE: Dict[str, str] = {
	".ts": "typescript",
	".vue": "vue",
}

EXCLUDED_SUBSTRINGS: Tuple[str, ...] = ("config", "main")


def detect_language(filename: str) -> str:
	_, ext = os.path.splitext(filename)
	return EXTENSION_LANGUAGE.get(ext, "unknown")


def is_excluded(path: str) -> bool:
	return any(part in path for part in EXCLUDED_SUBSTRINGS)


def _raise(err: OSError) -> None:
	raise err


def scan_repository(root: str) -> List[FileInfo]:
	"""Return every regular file below ``root``, depth first.

	A missing or unreadable directory raises ``OSError``; the walk has no
	recovery for it.
	"""
	if not os.path.isdir(root):
		raise FileNotFoundError(f"Root directory not found: {root}")

	files: List[FileInfo] = []
	for dirpath, dirnames, filenames in os.walk(root, onerror=_raise):
		dirnames.sort()
		for filename in sorted(filenames):
			path = os.path.join(dirpath, filename)
			files.append(
				FileInfo(
					path=path,
					rel_path=os.path.relpath(path, root),
					language=detect_language(filename),
				)
			)
	return files
