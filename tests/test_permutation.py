"""Tests for permutation apply/invert/compose."""

from dataclasses import FrozenInstanceError
from itertools import permutations

import pytest

from stereopy.exceptions import InvalidPermutation
from stereopy.permutation import (
    Permutation,
    apply,
    check_permutation,
    compose,
    invapply,
    invert,
    parse_permutation,
)


SAMPLE = ["a", "b", "c", "d", "e", "f"]


class TestParse:
    """Test parsing of numeral permutation strings."""

    def test_identity(self):
        assert parse_permutation("123456") == (1, 2, 3, 4, 5, 6)

    def test_table_window(self):
        assert parse_permutation("513624") == (5, 1, 3, 6, 2, 4)

    @pytest.mark.parametrize("text", [
        "123455",   # repeated symbol
        "12345",    # too short
        "1234567",  # too long
        "023456",   # zero
        "12a456",   # not a digit
        "12345²",   # superscript two
        "٣12456",  # arabic-indic three
        "",
    ])
    def test_invalid(self, text):
        with pytest.raises(InvalidPermutation):
            parse_permutation(text)

    def test_other_degree(self):
        assert parse_permutation("312", size=3) == (3, 1, 2)

    def test_check_permutation_reports_input(self):
        with pytest.raises(InvalidPermutation) as exc:
            check_permutation([1, 1, 2, 3, 4, 5])
        assert exc.value.permutation == (1, 1, 2, 3, 4, 5)


class TestApply:
    """Test applying a permutation to a sequence."""

    def test_moves_elements_to_slots(self):
        assert apply((2, 3, 1), "abc") == ["c", "a", "b"]

    def test_identity(self):
        assert apply("123456", SAMPLE) == SAMPLE

    def test_swap(self):
        assert apply("124356", SAMPLE) == ["a", "b", "d", "c", "e", "f"]

    def test_returns_new_list(self):
        seq = list(SAMPLE)
        apply("654321", seq)
        assert seq == SAMPLE

    def test_length_mismatch(self):
        with pytest.raises(InvalidPermutation):
            apply("123456", SAMPLE[:5])

    def test_not_a_bijection(self):
        with pytest.raises(InvalidPermutation):
            apply((1, 1, 2, 3, 4, 5), SAMPLE)


class TestInvert:
    """Test permutation inversion."""

    def test_known_inverse(self):
        assert invert("513624") == (2, 5, 3, 6, 1, 4)

    def test_identity_is_self_inverse(self):
        assert invert((1, 2, 3, 4, 5, 6)) == (1, 2, 3, 4, 5, 6)

    def test_undoes_apply_for_all_permutations(self):
        for perm in permutations(range(1, 7)):
            inv = invert(perm)
            assert apply(inv, apply(perm, SAMPLE)) == SAMPLE

    def test_double_inverse(self):
        for perm in permutations(range(1, 7)):
            assert invert(invert(perm)) == perm


class TestCompose:
    """Test permutation composition."""

    @pytest.mark.parametrize("p,q", [
        ("513624", "123456"),
        ("234561", "162345"),
        ("654321", "213456"),
        ("345612", "513624"),
    ])
    def test_matches_sequential_apply(self, p, q):
        assert apply(compose(p, q), SAMPLE) == apply(p, apply(q, SAMPLE))

    def test_with_inverse_is_identity(self):
        assert compose("513624", invert("513624")) == (1, 2, 3, 4, 5, 6)

    def test_degree_mismatch(self):
        with pytest.raises(InvalidPermutation):
            compose("123456", "12345")


class TestInvapply:
    """Test undoing a permutation given as a string."""

    def test_gathers_by_slot(self):
        seq = ["C", "F", "Br", "Cl", "I", "S"]
        assert invapply(seq, "513624") == ["I", "C", "Br", "S", "F", "Cl"]

    def test_matches_inverse_apply(self):
        for perm in ["513624", "234561", "162345", "654321"]:
            assert invapply(SAMPLE, perm) == apply(invert(perm), SAMPLE)

    def test_undoes_apply(self):
        for perm in permutations(range(1, 7)):
            text = "".join(map(str, perm))
            assert invapply(apply(text, SAMPLE), text) == SAMPLE

    def test_invalid_string(self):
        with pytest.raises(InvalidPermutation):
            invapply(SAMPLE, "112345")


class TestPermutationValue:
    """Test the Permutation value type."""

    def test_from_string(self):
        perm = Permutation.from_string("513624")
        assert perm.symbols == (5, 1, 3, 6, 2, 4)
        assert str(perm) == "513624"
        assert len(perm) == 6
        assert perm.degree == 6

    def test_list_is_stored_as_tuple(self):
        assert Permutation([2, 1, 3]).symbols == (2, 1, 3)

    def test_identity(self):
        ident = Permutation.identity()
        assert ident.is_identity
        assert str(ident) == "123456"
        assert not Permutation.from_string("213456").is_identity

    def test_inverse_and_compose(self):
        perm = Permutation.from_string("513624")
        assert perm.compose(perm.inverse()).is_identity
        assert perm.inverse().compose(perm) == Permutation.identity()

    def test_apply(self):
        assert Permutation.from_string("231").apply("abc") == ["c", "a", "b"]

    def test_accepted_by_functions(self):
        perm = Permutation.from_string("513624")
        assert invert(perm) == invert("513624")
        assert invapply(SAMPLE, perm) == invapply(SAMPLE, "513624")

    def test_hashable_value(self):
        assert Permutation.from_string("123456") == Permutation((1, 2, 3, 4, 5, 6))
        assert len({Permutation.from_string("123456"), Permutation.identity()}) == 1

    def test_frozen(self):
        perm = Permutation.identity()
        with pytest.raises(FrozenInstanceError):
            perm.symbols = (2, 1, 3, 4, 5, 6)

    def test_invalid(self):
        with pytest.raises(InvalidPermutation):
            Permutation((1, 2, 2))
