from __future__ import annotations

import argparse
import logging

from jsusage.analyze import analyze_project
from jsusage.summarize import format_report


DEFAULT_ROOT = "src"


def cmd_analyze(args: argparse.Namespace) -> None:
	stats, summary = analyze_project(args.path)
	print(format_report(stats, summary))


def main() -> None:
	parser = argparse.ArgumentParser(
		prog="jsusage",
		description="Count JS built-in calls and keywords in .ts and .vue files",
	)
	parser.add_argument("path", nargs="?", default=DEFAULT_ROOT, help="Path to source root")
	parser.add_argument(
		"--log-level",
		default="WARNING",
		choices=["DEBUG", "INFO", "WARNING", "ERROR"],
		help="Logging verbosity",
	)
	parser.set_defaults(func=cmd_analyze)

	args = parser.parse_args()
	logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")
	args.func(args)


if __name__ == "__main__":
	main()
