import pytest

from MirPatterns.Compiler.Compiler import parse_pattern
from MirPatterns.SemanticAnalysis.ASTs import (
    BooleanLiteralAst, CallAst, OperandConstantAst, OperandCopyAst, OperandMoveAst, PathAst, QualifiedPathAst,
    RvalueAggregateAst, RvalueAnyAst, RvalueArrayAst, RvalueArrayRepeatAst, RvalueCastAst, RvalueRawPtrAst,
    RvalueRawRefAst, RvalueRefAst, RvalueTupleAst, RvalueUseAst)

from conftest import assert_fails, assert_round_trip


@pytest.mark.parametrize("code", [
    "std::mem::take",
    "move y",
    "copy (*x).0",
    "const 0_usize",
    "const -1_i32",
    "const true",
])
def test_operand(code):
    assert_round_trip("operand", code)


@pytest.mark.parametrize("code, cls", [
    ("copy x", OperandCopyAst),
    ("move x", OperandMoveAst),
    ("const 1", OperandConstantAst),
    ("x", PathAst),
    ("<usize as Step>::forward_unchecked", QualifiedPathAst),
])
def test_operand_variants(code, cls):
    assert isinstance(parse_pattern(code, "operand"), cls)


def test_constant_literal():
    ast = parse_pattern("const 0_usize", "operand")
    assert ast.literal.value == 0
    assert ast.literal.suffix == "usize"
    assert str(ast) == "const 0_usize"


def test_boolean_constant():
    ast = parse_pattern("const false", "operand")
    assert isinstance(ast.literal, BooleanLiteralAst)
    assert ast.literal.value is False


def test_operand_with_trailing_tokens():
    assert_fails("operand", "copy from_ptr as", "unexpected token")


def test_cast_kind():
    ast = assert_round_trip("cast_kind", "PtrToPtr")
    assert str(ast.identifier) == "PtrToPtr"


@pytest.mark.parametrize("code", [
    "from_ptr as *const u8(PtrToPtr)",
    "copy x as isize (IntToInt)",
    "move islice as PtrI8 (PtrToPtr)",
])
def test_rvalue_cast(code):
    assert_round_trip("rvalue_cast", code)


def test_rvalue_cast_without_kind():
    error = assert_fails("rvalue_cast", "from_ptr as *const u8", "unexpected end of input, expected parentheses")
    assert error.committed


def test_rvalue_cast_with_wrong_token_before_kind():
    assert_fails("rvalue_cast", "from_ptr as *const u8 ;", "expected parentheses")


@pytest.mark.parametrize("code", [
    "_",
    "&x",
    "&mut y",
    "&raw const *x",
    "&raw mut *y",
    "&(*uslice_ptr)",
    "&*to_raw_slice",
    "[const 0; 5]",
    "[const 0, const 1, const 2, const 3, const 4]",
    "[const 0, const 1,]",
    "[]",
    "(const 0, const 1, const 2, const 3, const 4)",
    "Test { x: const 0 }",
    "Test { x: const 0, y: move z, }",
    "*const [i32] from (ptr, meta)",
    "*mut SliceU8 from (copy to_ptr, copy to_len)",
    "copy x as isize (IntToInt)",
    "std::mem::take(move y)",
    "< <core::ffi::c_str::CStr>::from_bytes_with_nul_unchecked>::___rt_impl(move uslice)",
    "$crate::ffi::sqlite3session_attach(move s, move iptr)",
    "Vec::capacity(move from_vec)",
    "foo()",
    "copy x",
    "const 1_usize",
])
def test_rvalue_or_call(code):
    assert_round_trip("rvalue_or_call", code)


@pytest.mark.parametrize("code, cls", [
    ("_", RvalueAnyAst),
    ("&x", RvalueRefAst),
    ("&raw const *x", RvalueRawRefAst),
    ("&raw", RvalueRefAst),
    ("[const 0; 5]", RvalueArrayRepeatAst),
    ("[const 0, const 1]", RvalueArrayAst),
    ("(const 0, const 1)", RvalueTupleAst),
    ("Test { x: const 0 }", RvalueAggregateAst),
    ("*const [i32] from (ptr, meta)", RvalueRawPtrAst),
    ("copy x as isize (IntToInt)", RvalueCastAst),
    ("Some(copy x1)", CallAst),
    ("copy x", RvalueUseAst),
    ("copy (x3 as Some).0", RvalueUseAst),
    ("copy (*self).mem", RvalueUseAst),
    ("x", RvalueUseAst),
])
def test_rvalue_or_call_disambiguation(code, cls):
    assert isinstance(parse_pattern(code, "rvalue_or_call"), cls)


def test_call_arguments():
    ast = parse_pattern("$crate::ffi::sqlite3session_attach(move s, move iptr)", "call")
    assert ast.callee.is_crate_relative
    assert [str(argument) for argument in ast.arguments] == ["move s", "move iptr"]


def test_array_trailing_comma_is_kept():
    ast = parse_pattern("[const 0, const 1,]", "rvalue_or_call")
    assert len(ast.operands) == 2
    assert ast.trailing_comma is not None


def test_raw_ref_mutability():
    assert parse_pattern("&raw mut *y", "rvalue_or_call").is_mutable
    assert not parse_pattern("&raw const *x", "rvalue_or_call").is_mutable


@pytest.mark.parametrize("code, message", [
    ("[const 0; ]", "expected integer literal"),
    ("*const u8 from (ptr)", "expected `,`"),
    ("foo(copy x", "unexpected end of input, expected `)`"),
    ("Test { x }", "expected `}`"),
])
def test_rvalue_errors(code, message):
    assert_fails("rvalue_or_call", code, message)
