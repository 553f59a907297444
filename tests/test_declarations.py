import pytest

from MirPatterns.Compiler.Compiler import parse_pattern
from MirPatterns.SemanticAnalysis.ASTs import (
    LetDeclAst, RvalueAnyAst, RvalueCastAst, TypeDeclAst, TypeSliceAst, UseDeclAst)

from conftest import assert_fails, assert_round_trip


@pytest.mark.parametrize("code", [
    "meta!($T:ty);",
    "meta![$T:ty, $U:ty];",
    "meta! { $T:ty, $U:ty, }",
    "meta! { $T:ty };",
    "meta!();",
])
def test_meta(code):
    assert_round_trip("meta", code)


def test_meta_items():
    ast = parse_pattern("meta![$T:ty, $U:ty];", "meta")
    assert [item.variable.name for item in ast.items] == ["T", "U"]
    assert [item.kind.value for item in ast.items] == ["ty", "ty"]
    assert ast.trailing_comma is None


def test_meta_trailing_comma():
    ast = parse_pattern("meta! { $T:ty, $U:ty, }", "meta")
    assert ast.trailing_comma is not None
    assert ast.semicolon_token is None


def test_meta_fragment_accepts_any_kind():
    # Kinds are only checked inside a pattern unit.
    assert_round_trip("meta", "meta!($E:expr);")


@pytest.mark.parametrize("code, message", [
    ("meta!($T:ty)", "unexpected end of input, expected `;`"),
    ("meta![$T:ty);", "expected `]`"),
    ("meta!<$T:ty>;", "unexpected token"),
    ("meta!($T);", "expected `)`"),
    ("meta($T:ty);", "expected `!`"),
])
def test_meta_errors(code, message):
    assert_fails("meta", code, message)


@pytest.mark.parametrize("code", [
    "type SliceT = [$T];",
    "type RefSliceT = &SliceT;",
    "type NonNullSliceU8 = NonNull<[u8]>;",
    "use core::ffi::c_str::CString;",
    "use $crate::ffi::sqlite3session_attach;",
    "let x: u32 = const 0_usize;",
    "let to_ptr: *const u8 = from_ptr as *const u8 (PtrToPtr);",
    "let from_slice: SliceT = _;",
    "let to_raw_slice: PtrSliceU8 = *const SliceU8 from (to_ptr, t_len);",
    "let ret: i32;",
])
def test_declaration(code):
    assert_round_trip("declaration", code)


@pytest.mark.parametrize("code, cls", [
    ("type SliceT = [$T];", TypeDeclAst),
    ("use core::ptr::non_null::NonNull;", UseDeclAst),
    ("let x: u32 = const 0_usize;", LetDeclAst),
])
def test_declaration_variants(code, cls):
    assert isinstance(parse_pattern(code, "declaration"), cls)


def test_type_declaration():
    ast = parse_pattern("type SliceT = [$T];", "type_decl")
    assert ast.name.value == "SliceT"
    assert isinstance(ast.type, TypeSliceAst)


def test_let_declaration():
    ast = parse_pattern("let to_ptr: *const u8 = from_ptr as *const u8 (PtrToPtr);", "let_decl")
    assert ast.name.value == "to_ptr"
    assert str(ast.type) == "*const u8"
    assert isinstance(ast.value, RvalueCastAst)


def test_let_declaration_any_value():
    assert isinstance(parse_pattern("let from_slice: SliceT = _;", "let_decl").value, RvalueAnyAst)


def test_uninitialised_let_declaration():
    ast = parse_pattern("let s: i32;", "let_decl")
    assert ast.assign_token is None
    assert ast.value is None


def test_use_declaration():
    ast = parse_pattern("use $crate::ffi::sqlite3session_attach;", "use_decl")
    assert ast.path.is_crate_relative
    assert ast.path.last_segment.identifier.value == "sqlite3session_attach"


@pytest.mark.parametrize("code, message", [
    ("x = copy y;", "unexpected token"),
    ("let x = const 0_usize;", "expected `:`"),
    ("let x: u32 = const 0_usize", "unexpected end of input, expected `;`"),
    ("let type: u32;", "expected identifier, found keyword `type`"),
    ("use std::mem", "unexpected end of input, expected `;`"),
    ("type A = u32", "unexpected end of input, expected `;`"),
    ("type A<T> = u32;", "generics not supported on type declaration"),
])
def test_declaration_errors(code, message):
    assert_fails("declaration", code, message)
