from __future__ import annotations

from collections import Counter
from typing import FrozenSet, Iterable, Tuple

from .model import AwaitedCall, CallSite, ClassDecl, Keyword, MethodDecl, NodeFact


VOCABULARY: Tuple[str, ...] = (
	"map",
	"filter",
	"reduce",
	"forEach",
	"find",
	"sort",
	"some",
	"every",
	"flat",
	"flatMap",
	"splice",
	"slice",
	"push",
	"pop",
	"shift",
	"unshift",
	"split",
	"join",
	"toUpperCase",
	"toLowerCase",
	"trim",
	"trimStart",
	"trimEnd",
	"replace",
	"replaceAll",
	"match",
	"matchAll",
	"includes",
	"startsWith",
	"endsWith",
	"now",
	"toISOString",
	"toLocaleDateString",
	"toLocaleTimeString",
	"getFullYear",
	"getMonth",
	"getDate",
	"setFullYear",
	"setMonth",
	"setDate",
	"parseInt",
	"parseFloat",
	"Number",
	"String",
	"JSON.parse",
	"JSON.stringify",
	"Object.entries",
	"Object.keys",
	"Object.values",
	"round",
	"floor",
	"ceil",
	"max",
	"min",
	"random",
	"ref",
	"reactive",
	"computed",
	"watch",
	"watchEffect",
)

_VOCABULARY_SET: FrozenSet[str] = frozenset(VOCABULARY)


def in_vocabulary(label: str) -> bool:
	return label in _VOCABULARY_SET


def count_fact(fact: NodeFact, stats: Counter) -> None:
	"""Apply every matching rule for ``fact`` to ``stats``.

	Rules are independent: an awaited vocabulary call arrives both as a
	``CallSite`` and as an ``AwaitedCall`` and is counted once for each.
	"""
	if isinstance(fact, CallSite):
		if in_vocabulary(fact.property):
			stats[fact.property] += 1
		if fact.object is not None:
			qualified = f"{fact.object}.{fact.property}"
			if in_vocabulary(qualified):
				stats[qualified] += 1
	elif isinstance(fact, MethodDecl):
		if in_vocabulary(fact.name):
			stats[fact.name] += 1
	elif isinstance(fact, AwaitedCall):
		if in_vocabulary(fact.property):
			stats[fact.property] += 1
	elif isinstance(fact, Keyword):
		stats[fact.label] += 1
	elif isinstance(fact, ClassDecl):
		stats["class"] += 1
		if fact.extends:
			stats["extends"] += 1
		if fact.implements:
			stats["implements"] += 1
		if fact.decorated:
			stats["decorators"] += 1
		if fact.abstract:
			stats["abstract"] += 1


def count_facts(facts: Iterable[NodeFact], stats: Counter) -> None:
	for fact in facts:
		count_fact(fact, stats)
