"""
Tests for finite functions and diagrammatic-order composition
"""

import itertools

import pytest
import numpy as np

from finite_dinaturals import FiniteFunction, InvalidFunction, TypeMismatch, compose, chain, render_chain
from finite_dinaturals.enumeration import functions


def F(tgt, vals):
    return FiniteFunction.from_values(tgt, vals)


class TestConstruction:
    def test_identity(self):
        f = FiniteFunction.identity(3)
        assert f.tgt == 3
        assert f.src == 3
        assert f.as_tuple() == (0, 1, 2)
        assert f.is_identity()

    def test_zeros(self):
        f = FiniteFunction.zeros(4, 2)
        assert f.src == 4
        assert f.tgt == 2
        assert f.as_tuple() == (0, 0, 0, 0)
        assert not f.is_identity()

    def test_from_values(self):
        f = F(3, [0, 1, 1])
        assert f.src == 3
        assert f.tgt == 3
        assert f.as_tuple() == (0, 1, 1)

    def test_src_is_derived_from_vals(self):
        f = F(5, [4, 0])
        assert f.src == 2
        assert f.tgt == 5

    def test_value_out_of_range(self):
        with pytest.raises(InvalidFunction):
            F(2, [0, 2])

    def test_negative_value(self):
        with pytest.raises(InvalidFunction):
            F(2, [0, -1])

    def test_non_integer_values(self):
        with pytest.raises(InvalidFunction):
            F(2, [0.0, 1.0])

    def test_non_integer_codomain(self):
        with pytest.raises(InvalidFunction):
            F(2.7, [0, 1])
        with pytest.raises(InvalidFunction):
            F("3", [0, 2])
        with pytest.raises(InvalidFunction):
            F(True, [0])

    def test_numpy_integer_codomain(self):
        f = F(np.int64(3), [0, 2])
        assert f.tgt == 3
        assert type(f.tgt) is int

    def test_two_dimensional_values(self):
        with pytest.raises(InvalidFunction):
            FiniteFunction(2, np.zeros((2, 2), dtype=int))

    def test_invalid_function_is_value_error(self):
        with pytest.raises(ValueError):
            F(1, [1])

    def test_empty_domain(self):
        f = F(0, [])
        assert f.src == 0
        assert f.tgt == 0

    def test_values_are_read_only(self):
        f = F(3, [0, 1, 2])
        with pytest.raises(ValueError):
            f.vals[0] = 2

    def test_input_array_not_aliased(self):
        arr = np.array([0, 1])
        f = FiniteFunction(2, arr)
        arr[0] = 1
        assert f.as_tuple() == (0, 1)


class TestEqualityAndRendering:
    def test_structural_equality(self):
        assert F(3, [0, 1, 1]) == F(3, [0, 1, 1])
        assert F(3, [0, 1, 1]) != F(3, [0, 1, 2])

    def test_codomain_matters(self):
        assert F(2, [0, 1]) != F(3, [0, 1])

    def test_domain_matters(self):
        assert F(2, [0, 1]) != F(2, [0, 1, 1])

    def test_hash_consistent_with_equality(self):
        assert hash(F(3, [2, 0])) == hash(F(3, [2, 0]))
        assert len({F(3, [2, 0]), F(3, [2, 0]), F(3, [0, 2])}) == 2

    def test_str(self):
        assert str(F(3, [0, 1, 1])) == "[0, 1, 1]"
        assert str(F(0, [])) == "[]"

    def test_repr(self):
        assert repr(F(3, [0, 1, 1])) == "FiniteFunction(tgt=3, vals=[0, 1, 1])"

    def test_render_chain(self):
        assert render_chain([F(2, [0, 0]), F(2, [1, 0])]) == "[0, 0] ; [1, 0]"


class TestCompose:
    def test_diagrammatic_order(self):
        # Outputs of the first function index into the second
        assert compose(F(3, [0, 1, 1]), F(3, [1, 0, 2])) == F(3, [1, 0, 0])

    def test_then(self):
        assert F(3, [0, 1, 1]).then(F(3, [1, 0, 2])) == F(3, [1, 0, 0])

    def test_result_types(self):
        h = compose(F(3, [2, 0]), F(4, [3, 3, 1]))
        assert h.src == 2
        assert h.tgt == 4
        assert h.as_tuple() == (1, 3)

    def test_type_mismatch(self):
        f = F(3, [0, 1])
        g = F(2, [0, 1])
        with pytest.raises(TypeMismatch) as excinfo:
            compose(f, g)
        assert excinfo.value.left is f
        assert excinfo.value.right is g

    def test_type_mismatch_never_truncates(self):
        with pytest.raises(TypeMismatch):
            compose(F(2, [0, 1]), F(2, [0, 1, 1]))

    def test_result_is_new_function(self):
        f = F(2, [1, 0])
        g = FiniteFunction.identity(2)
        h = compose(f, g)
        assert h == f
        assert h is not f
        assert not np.shares_memory(h.vals, f.vals)

    def test_identity_laws(self):
        for f in functions(2, 3):
            assert compose(FiniteFunction.identity(2), f) == f
            assert compose(f, FiniteFunction.identity(3)) == f


class TestChain:
    def test_single_function_unchanged(self):
        f = F(2, [1, 1])
        assert chain([f]) is f

    def test_empty_chain(self):
        with pytest.raises(ValueError):
            chain([])

    def test_chain_folds_left(self):
        fs = [F(3, [2, 0]), F(2, [1, 0, 1]), F(2, [1, 1])]
        assert chain(fs) == compose(compose(fs[0], fs[1]), fs[2])

    def test_chain_type_mismatch(self):
        with pytest.raises(TypeMismatch):
            chain([F(2, [0, 1]), F(2, [0, 1]), F(2, [0, 1, 0])])

    def test_associativity(self):
        fs = list(functions(2, 2))
        for f, g, h in itertools.product(fs, repeat=3):
            left = chain([chain([f, g]), h])
            right = chain([f, chain([g, h])])
            assert left == chain([f, g, h]) == right

    def test_associativity_mixed_sizes(self):
        for f in functions(1, 2):
            for g in functions(2, 3):
                for h in functions(3, 2):
                    assert chain([chain([f, g]), h]) == chain([f, chain([g, h])])


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
