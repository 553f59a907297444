import pytest

from MirPatterns.Compiler.Compiler import parse_pattern
from MirPatterns.SemanticAnalysis.ASTs import (
    AssignStatementAst, BlockAst, BooleanLiteralAst, BreakAst, CallAst, CallStatementAst, DiscardStatementAst,
    DropStatementAst, LoopAst, NumberLiteralAst, RvalueAnyAst, RvalueCastAst, RvalueUseAst, SwitchIntAst)

from conftest import assert_fails, assert_round_trip

BLOCK = """{
    x1 = copy x0;
    x2 = <usize as Step>::forward_unchecked(copy x1, const 1_usize);
    x0 = move x2;
    x3 = Some(copy x1);
    x = copy (x3 as Some).0;
    base = copy (*self).mem;
    offset = copy x as isize (IntToInt);
    elem_ptr = Offset(copy base, copy offset);
    _ = drop_in_place(copy elem_ptr);
}"""

SWITCH_INT = """switchInt(move cmp) {
    false => break,
    _ => """ + BLOCK + """
}"""

LOOP = """loop {
    x_cmp = copy x0;
    cmp = Lt(move x_cmp, copy len);
    """ + SWITCH_INT + """
}"""


def test_assign_without_semicolon():
    ast = assert_round_trip("statement_assign", "*x = std::mem::take(move y)", False)
    assert ast.semicolon_token is None
    assert isinstance(ast.value, CallAst)


def test_assign_requires_semicolon_by_default():
    assert_fails("statement_assign", "*x = std::mem::take(move y)", "unexpected end of input, expected `;`")


@pytest.mark.parametrize("code", [
    "*x = copy y.0;",
    "cmp = Lt(move x_cmp, copy len);",
    "x1 = copy x0;",
    "x2 = <usize as Step>::forward_unchecked(copy x1, const 1_usize);",
    "x3 = Some(copy x1);",
    "x = copy (x3 as Some).0;",
    "offset = copy x as isize (IntToInt);",
    "_ = drop_in_place(copy elem_ptr);",
    "*x = std::mem::take(move y);",
    "drop(y[x]);",
    "s = _;",
    "foo();",
    "loop {}",
    LOOP,
])
def test_statement(code):
    assert_round_trip("statement", code)


@pytest.mark.parametrize("code, cls", [
    ("x = copy y;", AssignStatementAst),
    ("std::mem::take(move y);", CallStatementAst),
    ("drop(y[x]);", DropStatementAst),
    ("drop(move x);", CallStatementAst),
    ("_ = drop_in_place(copy elem_ptr);", DiscardStatementAst),
    ("loop {}", LoopAst),
    ("switchInt(copy x) {}", SwitchIntAst),
])
def test_statement_variants(code, cls):
    assert isinstance(parse_pattern(code, "statement"), cls)


@pytest.mark.parametrize("code, cls", [
    ("x3 = Some(copy x1);", CallAst),
    ("x = copy y;", RvalueUseAst),
    ("s = _;", RvalueAnyAst),
    ("offset = copy x as isize (IntToInt);", RvalueCastAst),
])
def test_assigned_value(code, cls):
    assert isinstance(parse_pattern(code, "statement").value, cls)


def test_block():
    ast = assert_round_trip("block", BLOCK)
    assert len(ast.statements) == 9
    assert isinstance(ast.statements[-1], DiscardStatementAst)


def test_empty_block():
    ast = assert_round_trip("block", "{}")
    assert ast.statements == []


def test_switch_int():
    ast = assert_round_trip("switch_int", SWITCH_INT)
    assert str(ast.discriminant) == "move cmp"
    assert isinstance(ast.arms[0].key, BooleanLiteralAst)
    assert isinstance(ast.arms[0].body, BreakAst)
    assert ast.arms[1].is_otherwise
    assert isinstance(ast.arms[1].body, BlockAst)


def test_switch_int_statement_arms():
    code = """switchInt(copy _1) {
        0_isize => _0 = [const 3_u32, const 4_u32, const 5_u32],
        1_isize => _0 = [const 4_u32, const 5_u32, const 6_u32],
        _ => _0 = [const 5_u32, const 6_u32, const 7_u32],
    }"""
    ast = assert_round_trip("switch_int", code)
    assert [arm.key.value for arm in ast.arms[:2]] == [0, 1]
    assert isinstance(ast.arms[0].key, NumberLiteralAst)
    assert ast.arms[0].body.semicolon_token is None
    assert ast.arms[2].comma_token is not None


def test_switch_int_negative_key():
    ast = assert_round_trip("switch_int", "switchInt(copy x) { -1_i8 => break, _ => break }")
    assert ast.arms[0].key.value == -1


def test_switch_int_block_arm_needs_no_comma():
    assert_round_trip("switch_int", "switchInt(copy x) { 0 => {} _ => break }")


def test_switch_int_statement_arm_needs_comma():
    assert_fails("switch_int", "switchInt(copy x) { 0 => break 1 => break }", "expected `,`")


def test_loop():
    ast = assert_round_trip("loop", LOOP)
    assert len(ast.block.statements) == 3
    assert isinstance(ast.block.statements[2], SwitchIntAst)


def test_printed_block_is_indented():
    ast = parse_pattern("loop { x = copy y; loop { z = move x; } }", "loop")
    assert str(ast) == "loop {\n    x = copy y;\n    loop {\n        z = move x;\n    }\n}"


@pytest.mark.parametrize("code, message", [
    ("x = copy x0", "unexpected end of input, expected `;`"),
    ("loop", "unexpected end of input, expected `{`"),
    ("switchInt copy x", "expected `(`"),
    ("_ = copy x;", "expected `(`"),
])
def test_statement_errors(code, message):
    assert_fails("statement", code, message)


def test_switch_int_duplicate_wildcard():
    e = assert_fails("switch_int", "switchInt(copy x) { _ => break, 0 => break, _ => break }", "duplicate wildcard arm `_`")
    assert e.committed


@pytest.mark.parametrize("code", [
    "switchInt(copy x) { 0 => loop {} _ => break }",
    "switchInt(copy x) { 0 => switchInt(copy y) { _ => break } _ => break }",
])
def test_switch_int_brace_terminated_arms_need_no_comma(code):
    assert_round_trip("switch_int", code)
