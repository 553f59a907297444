import pytest

from MirPatterns.Compiler.Compiler import parse_pattern
from MirPatterns.SemanticAnalysis.ASTs import (
    PlaceConstIndexAst, PlaceDerefAst, PlaceDowncastAst, PlaceFieldAst, PlaceIndexAst, PlaceLocalAst, PlaceParenAst,
    PlaceSubsliceAst)

from conftest import assert_fails, assert_round_trip


@pytest.mark.parametrize("code", [
    "x",
    "self",
    "x.0",
    "(*x.0)",
    "(*x.0)[2 of 3]",
    "(*x.0)[y]",
    "(*x.0)[-3 of 4]",
    "(*x.0)[1:3]",
    "(*x.0)[1:-3]",
    "(*self).mem",
    "(x3 as Some).0",
    "(((cstring.inner).0).pointer)",
    "*x",
    "y[x]",
])
def test_place(code):
    assert_round_trip("place", code)


def test_local():
    ast = parse_pattern("x", "place")
    assert isinstance(ast, PlaceLocalAst)
    assert ast.local() is ast
    assert ast.projections() == []


def test_self_local():
    ast = parse_pattern("(*self).mem", "place")
    assert ast.local().name == "self"


def test_projection_order():
    ast = parse_pattern("(*x.0)[1:-3]", "place")
    assert isinstance(ast, PlaceSubsliceAst)
    assert isinstance(ast.place, PlaceParenAst)
    assert ast.local().name == "x"
    assert [type(projection) for projection in ast.projections()] == [PlaceFieldAst, PlaceDerefAst, PlaceSubsliceAst]


def test_deref_applies_to_the_whole_place():
    ast = parse_pattern("*x.0", "place")
    assert isinstance(ast, PlaceDerefAst)
    assert isinstance(ast.place, PlaceFieldAst)
    assert ast.place.index == 0


def test_named_field():
    ast = parse_pattern("x.mem", "place")
    assert ast.index is None
    assert str(ast.field) == "mem"


def test_const_index():
    ast = parse_pattern("(*x.0)[2 of 3]", "place")
    assert isinstance(ast, PlaceConstIndexAst)
    assert ast.offset.value == 2
    assert ast.min_length.value == 3
    assert not ast.from_end


def test_const_index_from_end():
    ast = parse_pattern("x[-3 of 4]", "place")
    assert ast.from_end
    assert ast.offset.value == -3
    assert str(ast.offset) == "-3"


def test_subslice():
    ast = parse_pattern("x[1:-3]", "place")
    assert ast.from_offset.value == 1
    assert ast.to_offset.value == -3
    assert ast.from_end


def test_index_by_place():
    ast = parse_pattern("x[y]", "place")
    assert isinstance(ast, PlaceIndexAst)
    assert ast.index.name == "y"


def test_downcast():
    ast = parse_pattern("(x3 as Some).0", "place")
    assert isinstance(ast.place, PlaceDowncastAst)
    assert str(ast.place.variant) == "Some"
    assert [type(projection) for projection in ast.projections()] == [PlaceDowncastAst, PlaceFieldAst]


@pytest.mark.parametrize("code, message", [
    ("from_ptr as", "unexpected token"),
    ("x.", "unexpected end of input, expected identifier"),
    ("x.;", "expected identifier"),
    ("x.self", "expected identifier, found keyword `self`"),
    ("x[1:]", "expected integer literal"),
    ("(x", "unexpected end of input, expected `)`"),
])
def test_place_errors(code, message):
    assert_fails("place", code, message)
