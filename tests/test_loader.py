"""Tests for fwjs_core.loader."""

import json

import pytest

from fwjs_core import (
    Assign,
    BinOp,
    FunctionApp,
    FunctionDecl,
    If,
    Literal,
    LoadError,
    Null,
    Op,
    Print,
    Seq,
    VBool,
    VInt,
    VarDecl,
    VarRef,
    While,
    evaluate,
    load,
    load_file,
    loads,
)


def lit(v):
    return {"type": "Literal", "value": v}


def ref(name):
    return {"type": "VarRef", "name": name}


class TestLiterals:
    def test_int(self):
        assert load(lit(3)) == Literal(VInt(3))

    def test_bool(self):
        assert load(lit(False)) == Literal(VBool(False))

    def test_null(self):
        assert load(lit(None)) == Literal(Null)

    def test_string_rejected(self):
        with pytest.raises(LoadError):
            load(lit("hi"))

    @pytest.mark.parametrize("value", [2**63, -(2**63) - 1, 18446744073709551616])
    def test_int_outside_64_bits_rejected(self, value):
        with pytest.raises(LoadError, match="outside the 64-bit range"):
            load(lit(value))

    def test_int_at_64_bit_bounds(self):
        assert load(lit(2**63 - 1)) == Literal(VInt(2**63 - 1))
        assert load(lit(-(2**63))) == Literal(VInt(-(2**63)))

    def test_missing_value(self):
        with pytest.raises(LoadError, match="missing 'value'"):
            load({"type": "Literal"})


class TestNodes:
    def test_binop_symbol(self):
        node = load({"type": "BinOp", "op": "<=", "left": lit(1), "right": ref("x")})
        assert node == BinOp(Op.LE, Literal(VInt(1)), VarRef("x"))

    def test_binop_name(self):
        node = load({"type": "BinOp", "op": "MOD", "left": lit(1), "right": lit(2)})
        assert node.op is Op.MOD

    def test_unknown_operator(self):
        with pytest.raises(LoadError, match="unknown operator"):
            load({"type": "BinOp", "op": "&&", "left": lit(1), "right": lit(2)})

    def test_if_without_else(self):
        node = load({"type": "If", "cond": lit(True), "then": lit(1)})
        assert node == If(Literal(VBool(True)), Literal(VInt(1)), None)

    def test_while(self):
        node = load({"type": "While", "cond": lit(False), "body": lit(0)})
        assert isinstance(node, While)

    def test_seq_with_nulls(self):
        assert load({"type": "Seq", "first": None, "second": lit(1)}) == Seq(None, Literal(VInt(1)))

    def test_var_decl_and_assign(self):
        assert load({"type": "VarDecl", "name": "x"}) == VarDecl("x", None)
        assert load({"type": "Assign", "name": "x", "expr": lit(2)}) == Assign("x", Literal(VInt(2)))

    def test_function_decl_and_app(self):
        node = load({
            "type": "FunctionApp",
            "func": {"type": "FunctionDecl", "params": ["a"], "body": ref("a")},
            "args": [lit(4)],
        })
        assert node == FunctionApp(FunctionDecl(("a",), VarRef("a")), (Literal(VInt(4)),))

    def test_print(self):
        assert load({"type": "Print", "expr": lit(1)}) == Print(Literal(VInt(1)))

    def test_list_is_seq_chain(self):
        node = load([lit(1), lit(2), lit(3)])
        assert node == Seq(Literal(VInt(1)), Seq(Literal(VInt(2)), Literal(VInt(3))))

    def test_empty_list(self):
        assert load([]) == Seq(None, None)


class TestMalformed:
    def test_unknown_type(self):
        with pytest.raises(LoadError, match="unknown node type 'Lambda'"):
            load({"type": "Lambda"})

    def test_not_an_object(self):
        with pytest.raises(LoadError):
            load(42)

    def test_bad_name(self):
        with pytest.raises(LoadError):
            load({"type": "VarRef", "name": ""})

    def test_bad_params(self):
        with pytest.raises(LoadError):
            load({"type": "FunctionDecl", "params": [1], "body": lit(0)})

    def test_invalid_json(self):
        with pytest.raises(LoadError, match="invalid JSON"):
            loads("{not json")


class TestFiles:
    def test_load_file_and_run(self, tmp_path):
        program = [
            {"type": "VarDecl", "name": "x", "init": lit(3)},
            {"type": "VarDecl", "name": "y", "init": lit(4)},
            {"type": "BinOp", "op": "+", "left": ref("x"), "right": ref("y")},
        ]
        path = tmp_path / "prog.json"
        path.write_text(json.dumps(program), encoding="utf-8")
        assert evaluate(load_file(path)) == VInt(7)
