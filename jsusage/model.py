from __future__ import annotations

from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, Field


class FileInfo(BaseModel):
	path: str
	rel_path: str
	language: str


class CallSite(BaseModel):
	"""A call through a member expression, e.g. ``items.map(fn)``."""

	kind: Literal["call"] = "call"
	property: str
	# Only set when the receiver is a plain identifier (``JSON`` in ``JSON.parse``)
	object: Optional[str] = None


class MethodDecl(BaseModel):
	kind: Literal["method"] = "method"
	name: str


class AwaitedCall(BaseModel):
	kind: Literal["await"] = "await"
	property: str


class Keyword(BaseModel):
	kind: Literal["keyword"] = "keyword"
	label: str


class ClassDecl(BaseModel):
	kind: Literal["class"] = "class"
	extends: bool = False
	implements: bool = False
	decorated: bool = False
	abstract: bool = False


NodeFact = Annotated[
	Union[CallSite, MethodDecl, AwaitedCall, Keyword, ClassDecl],
	Field(discriminator="kind"),
]


class ScanSummary(BaseModel):
	analyzed: int = 0
	skipped: int = 0
	failed: int = 0

	@property
	def total(self) -> int:
		return self.analyzed + self.skipped + self.failed
