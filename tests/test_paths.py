import pytest

from MirPatterns.Compiler.Compiler import parse_pattern
from MirPatterns.SemanticAnalysis.ASTs import MetaVariableAst, PathAst, QualifiedPathAst
from MirPatterns.SyntacticAnalysis.ParserError import ParserErrorType

from conftest import assert_fails, assert_round_trip

PATHS = [
    "std",
    "std::mem::take",
    "Vec<T>",
    "core::ffi::c_str::CStr",
    "$crate::ffi::sqlite3session_attach",
]

QUALIFIED_PATHS = [
    "<Vec<T> >",
    "<Vec<T> as Clone>::clone",
    "<$crate::alloc::Vec<T> as Clone>::clone",
    "<Vec<T> as $crate::clone::Clone>::clone",
    "<$crate::alloc::Vec<T> as $crate::clone::Clone>::clone",
    "<core::ffi::c_str::CStr>",
    "<core::ffi::c_str::CStr>::from_bytes_with_nul_unchecked",
    "< <core::ffi::c_str::CStr>::from_bytes_with_nul_unchecked>::___rt_impl",
]


@pytest.mark.parametrize("code", ["std", "Vec<T>", "HashMap<K, V>", "$T"])
def test_path_segment(code):
    assert_round_trip("path_segment", code)


@pytest.mark.parametrize("code", PATHS)
def test_path(code):
    assert_round_trip("path", code)


@pytest.mark.parametrize("code", PATHS + QUALIFIED_PATHS)
def test_type_path(code):
    assert_round_trip("type_path", code)


def test_path_segments():
    ast = parse_pattern("core::ffi::c_str::CStr", "path")
    assert isinstance(ast, PathAst)
    assert [str(segment) for segment in ast.segments] == ["core", "ffi", "c_str", "CStr"]
    assert not ast.is_crate_relative


def test_crate_relative_path():
    ast = parse_pattern("$crate::ffi::sqlite3session_attach", "path")
    assert ast.is_crate_relative
    assert str(ast.last_segment) == "sqlite3session_attach"


def test_generic_arguments_live_on_the_segment():
    ast = parse_pattern("std::vec::Vec<$T1>", "path")
    generics = ast.last_segment.generic_arguments
    assert len(generics.arguments) == 1
    assert isinstance(generics.arguments[0].segments[0].identifier, MetaVariableAst)


def test_nested_qualified_path():
    ast = parse_pattern("< <core::ffi::c_str::CStr>::from_bytes_with_nul_unchecked>::___rt_impl", "type_path")
    assert isinstance(ast, QualifiedPathAst)
    assert isinstance(ast.self_type, QualifiedPathAst)
    assert ast.trait is None
    assert str(ast.segments[0]) == "___rt_impl"


def test_qualified_path_with_trait():
    ast = parse_pattern("<Vec<T> as $crate::clone::Clone>::clone", "type_path")
    assert str(ast.trait) == "$crate::clone::Clone"
    assert str(ast.self_type) == "Vec<T>"


@pytest.mark.parametrize("rule", ["path", "type_path"])
@pytest.mark.parametrize("code, message", [
    ("crate::crate", "expected identifier, found keyword `crate`"),
    ("$crate::crate", "expected identifier, found keyword `crate`"),
    ("std::crate", "expected identifier, found keyword `crate`"),
    ("$crate", "expected `::`"),
    ("$crate::", "unexpected end of input, expected identifier"),
    ("from_ptr as", "unexpected token"),
])
def test_path_errors(rule, code, message):
    assert_fails(rule, code, message)


def test_reserved_word_error_type():
    error = assert_fails("path", "std::crate", "expected identifier, found keyword `crate`")
    assert error.error_type == ParserErrorType.RESERVED_WORD


def test_crate_marker_error_is_committed():
    error = assert_fails("type_path", "$crate", "expected `::`")
    assert error.committed
