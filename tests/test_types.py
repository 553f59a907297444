import pytest

from MirPatterns.Compiler.Compiler import parse_pattern
from MirPatterns.SemanticAnalysis.ASTs import (
    NumberLiteralAst, PathAst, QualifiedPathAst, TypeArrayAst, TypePtrAst, TypeRefAst, TypeSliceAst, TypeTupleAst)
from MirPatterns.SyntacticAnalysis.ParserError import ParserErrorType

from conftest import assert_fails, assert_round_trip


@pytest.mark.parametrize("code", [
    "*const u8",
    "*mut $T1",
    "[T]",
    "[u32; 3]",
    "&[u8]",
    "&mut CStr",
    "&SliceT",
    "()",
    "(u8,)",
    "(u8, *const i8)",
    "NonNull<[u8]>",
    "std::vec::Vec<$T1>",
    "< <core::ffi::c_str::CStr>::from_bytes_with_nul_unchecked>::___rt_impl",
])
def test_type(code):
    assert_round_trip("type", code)


@pytest.mark.parametrize("code, cls", [
    ("*const u8", TypePtrAst),
    ("&mut u8", TypeRefAst),
    ("[u8]", TypeSliceAst),
    ("[u8; 4]", TypeArrayAst),
    ("(u8, u16)", TypeTupleAst),
    ("u8", PathAst),
    ("<u8 as Step>::Output", QualifiedPathAst),
])
def test_type_variants(code, cls):
    assert isinstance(parse_pattern(code, "type"), cls)


def test_pointer_mutability():
    assert not parse_pattern("*const u8", "type").is_mutable
    assert parse_pattern("*mut u8", "type").is_mutable


def test_array_length():
    ast = parse_pattern("[u32; 3]", "type")
    assert isinstance(ast.length, NumberLiteralAst)
    assert ast.length.value == 3


def test_single_element_tuple_keeps_comma():
    ast = parse_pattern("(u8,)", "type")
    assert ast.trailing_comma is not None
    assert str(ast) == "(u8,)"


def test_type_with_trailing_tokens():
    assert_fails("type", "*const u8(PtrToPtr)", "unexpected token")


def test_pointer_without_mutability():
    assert_fails("type", "*u8", "unexpected token")


@pytest.mark.parametrize("code", ["type SliceT = [T];", "type SliceT = [$T];", "type PtrU8 = *const u8;"])
def test_type_decl(code):
    assert_round_trip("type_decl", code)


def test_type_decl_with_generics():
    error = assert_fails("type_decl", "type SliceT<T> = [T];", "generics not supported on type declaration")
    assert error.error_type == ParserErrorType.UNSUPPORTED
