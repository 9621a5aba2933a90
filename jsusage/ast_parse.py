from __future__ import annotations

import re
from typing import Dict, Iterator, List, Optional, Tuple

from tree_sitter import Node, Parser, Tree
from tree_sitter_language_pack import get_parser

from .model import AwaitedCall, CallSite, ClassDecl, Keyword, MethodDecl, NodeFact


# tsx accepts type annotations, decorators and JSX in one grammar
TSX_PARSER: Parser = get_parser("tsx")

SCRIPT_BLOCK = re.compile(r"<script.*?>([\s\S]*?)</script>")

KEYWORD_LABELS: Dict[str, str] = {
	"for_statement": "for",
	"while_statement": "while",
	"do_statement": "do",
	"switch_statement": "switch",
	"try_statement": "try",
	"catch_clause": "catch",
	"return_statement": "return",
	"throw_statement": "throw",
	"arrow_function": "=>",
	"function_declaration": "function",
	"generator_function_declaration": "function",
}

VARIABLE_KINDS: Tuple[str, ...] = ("const", "let", "var")

CLASS_DECLARATIONS = ("class_declaration", "abstract_class_declaration")
FUNCTION_EXPRESSIONS = ("function_expression", "function", "generator_function")


class ParseError(ValueError):
	"""Raised when the source text does not form a valid syntax tree."""

	def __init__(self, message: str, line: int, column: int):
		super().__init__(f"{message} at line {line}, column {column}")
		self.line = line
		self.column = column


def extract_script_from_vue(code: str) -> str:
	match = SCRIPT_BLOCK.search(code)
	return match.group(1) if match else ""


def _first_error(root: Node) -> Optional[Node]:
	stack = [root]
	while stack:
		node = stack.pop()
		if node.type == "ERROR" or node.is_missing:
			return node
		stack.extend(reversed([c for c in node.children if c.has_error or c.is_missing]))
	return None


def parse_source(text: str) -> Tree:
	tree = TSX_PARSER.parse(text.encode("utf-8"))
	if tree.root_node.has_error:
		bad = _first_error(tree.root_node) or tree.root_node
		row, column = bad.start_point
		raise ParseError("Syntax error", row + 1, column + 1)
	return tree


def _text(node: Node) -> str:
	return node.text.decode("utf-8") if node.text else ""


def _has_token(node: Node, token: str) -> bool:
	return any(not child.is_named and child.type == token for child in node.children)


def _unwrap_parens(node: Optional[Node]) -> Optional[Node]:
	while node is not None and node.type == "parenthesized_expression":
		node = node.named_children[0] if node.named_children else None
	return node


def _member_call(node: Optional[Node]) -> Optional[Tuple[str, Optional[str]]]:
	"""Return (property, receiver) for ``receiver.property(...)`` calls."""
	if node is None or node.type != "call_expression":
		return None
	callee = node.child_by_field_name("function")
	if callee is None or callee.type != "member_expression":
		return None
	prop = callee.child_by_field_name("property")
	if prop is None:
		return None
	obj = callee.child_by_field_name("object")
	receiver = _text(obj) if obj is not None and obj.type == "identifier" else None
	return _text(prop), receiver


def _is_optional_call(node: Node) -> bool:
	"""True when any link of the callee chain uses `?.`, e.g. ``a?.b.map()``."""
	cursor: Optional[Node] = node
	while cursor is not None and cursor.type in ("call_expression", "member_expression", "subscript_expression"):
		if any(c.type == "optional_chain" for c in cursor.children):
			return True
		field = "function" if cursor.type == "call_expression" else "object"
		cursor = cursor.child_by_field_name(field)
	return False


def _declaration_kind(node: Node) -> Optional[str]:
	kind = node.child_by_field_name("kind")
	if kind is not None:
		return kind.type
	for child in node.children:
		if not child.is_named and child.type in VARIABLE_KINDS:
			return child.type
	return None


def _has_decorator(node: Optional[Node]) -> bool:
	return node is not None and any(c.type == "decorator" for c in node.named_children)


def _class_fact(node: Node) -> ClassDecl:
	heritage = next((c for c in node.named_children if c.type == "class_heritage"), None)
	clauses = [c.type for c in heritage.named_children] if heritage is not None else []
	parent = node.parent
	exported = parent is not None and parent.type == "export_statement"
	return ClassDecl(
		extends="extends_clause" in clauses,
		implements="implements_clause" in clauses,
		decorated=_has_decorator(node) or (exported and _has_decorator(parent)),
		abstract=node.type == "abstract_class_declaration",
	)


def _export_label(node: Node) -> Optional[str]:
	if _has_token(node, "default"):
		return "export default"
	# TypeScript `export = x`, `export as namespace X` and `export import A = B.C`
	if (
		_has_token(node, "=")
		or _has_token(node, "namespace")
		or _has_token(node, "import")
		or any(c.type == "import_alias" for c in node.named_children)
	):
		return None
	if _has_token(node, "*"):
		return "export *"
	return "export"


def _is_exported(node: Node) -> bool:
	parent = node.parent
	return parent is not None and parent.type == "export_statement"


def node_facts(node: Node) -> List[NodeFact]:
	"""Translate one syntax node into the facts the counting rules understand."""
	kind = node.type
	facts: List[NodeFact] = []

	if kind == "call_expression":
		# Optional-chain calls are a separate call kind; only the await rule sees them
		call = None if _is_optional_call(node) else _member_call(node)
		if call is not None:
			facts.append(CallSite(property=call[0], object=call[1]))
	elif kind == "await_expression":
		operand = _unwrap_parens(node.named_children[0]) if node.named_children else None
		call = _member_call(operand)
		if call is not None:
			facts.append(AwaitedCall(property=call[0]))
	elif kind == "method_definition":
		name = node.child_by_field_name("name")
		parent = node.parent
		if (
			name is not None
			and name.type == "property_identifier"
			and parent is not None
			and parent.type == "class_body"
		):
			facts.append(MethodDecl(name=_text(name)))
	elif kind == "if_statement":
		facts.append(Keyword(label="if"))
		if node.child_by_field_name("alternative") is not None:
			facts.append(Keyword(label="else"))
	elif kind in KEYWORD_LABELS:
		facts.append(Keyword(label=KEYWORD_LABELS[kind]))
	elif kind in ("lexical_declaration", "variable_declaration", "for_in_statement"):
		declared = _declaration_kind(node)
		if declared in VARIABLE_KINDS:
			facts.append(Keyword(label=declared))
	elif kind == "import_statement":
		if not any(c.type == "import_require_clause" for c in node.named_children):
			facts.append(Keyword(label="import"))
	elif kind == "export_statement":
		label = _export_label(node)
		if label is not None:
			facts.append(Keyword(label=label))
	elif kind in CLASS_DECLARATIONS:
		facts.append(_class_fact(node))
	elif kind == "class" and node.is_named and _is_exported(node):
		facts.append(_class_fact(node))
	elif kind in FUNCTION_EXPRESSIONS and node.is_named and _is_exported(node):
		facts.append(Keyword(label="function"))

	return facts


def iter_facts(tree: Tree) -> Iterator[NodeFact]:
	# Explicit stack, pre-order: deep trees must not hit the recursion limit
	stack = [tree.root_node]
	while stack:
		node = stack.pop()
		yield from node_facts(node)
		stack.extend(reversed(node.named_children))


def extract_facts(text: str) -> List[NodeFact]:
	return list(iter_facts(parse_source(text)))
