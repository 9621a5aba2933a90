from textwrap import dedent

import pytest

from jsusage.ast_parse import ParseError, extract_facts, extract_script_from_vue
from jsusage.model import AwaitedCall, CallSite, ClassDecl, Keyword, MethodDecl


def test_extract_script_from_vue():
	code = dedent(
		"""
		<template><div>{{ msg }}</div></template>
		<script setup lang="ts">
		const msg = "hi";
		</script>
		<script>
		export default {};
		</script>
		"""
	)
	script = extract_script_from_vue(code)
	assert 'const msg = "hi";' in script
	assert "export default" not in script
	assert "<template>" not in script


def test_vue_without_script_is_empty():
	assert extract_script_from_vue("<template><p>static</p></template>") == ""


def test_member_call_facts_in_order():
	assert extract_facts("items.map(x => x)") == [
		CallSite(property="map", object="items"),
		Keyword(label="=>"),
	]


def test_receiver_only_kept_for_identifiers():
	facts = extract_facts("this.items.sort();")
	assert facts == [CallSite(property="sort", object=None)]


def test_bare_calls_yield_no_facts():
	assert extract_facts('parseInt("1");') == []


def test_awaited_call_through_parentheses():
	facts = extract_facts("async function f() { await (api.filter(q)); }")
	assert Keyword(label="function") in facts
	assert AwaitedCall(property="filter") in facts
	assert CallSite(property="filter", object="api") in facts


def test_class_method_and_object_method():
	code = dedent(
		"""
		class Store {
			find(id: string) {
				return id;
			}
		}
		const o = { map() { return 1; } };
		"""
	)
	facts = extract_facts(code)
	assert MethodDecl(name="find") in facts
	assert MethodDecl(name="map") not in facts


def test_class_declaration_flags():
	code = dedent(
		"""
		@Component({})
		class Widget {}
		abstract class Repo extends Base implements Store {}
		"""
	)
	classes = [f for f in extract_facts(code) if isinstance(f, ClassDecl)]
	assert classes == [
		ClassDecl(decorated=True),
		ClassDecl(extends=True, implements=True, abstract=True),
	]


def test_decorator_on_export_marks_class():
	code = "@Injectable()\nexport class Service {}\n"
	facts = extract_facts(code)
	assert ClassDecl(decorated=True) in facts
	assert Keyword(label="export") in facts


def test_parse_error_reports_position():
	with pytest.raises(ParseError) as info:
		extract_facts("const = ;")
	assert info.value.line == 1
	assert "Syntax error" in str(info.value)


def test_empty_source_has_no_facts():
	assert extract_facts("") == []


def test_optional_call_only_seen_through_await():
	facts = extract_facts("async function f() { await api?.filter(q); }")
	assert AwaitedCall(property="filter") in facts
	assert not any(isinstance(f, CallSite) for f in facts)
