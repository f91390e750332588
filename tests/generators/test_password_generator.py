"""
Unit tests for password generation and class-coverage repair.
"""

from itertools import combinations

import pytest

from passforge.charset import CANONICAL_ORDER, build_alphabet, classify
from passforge.errors import InvalidConfigError, RngExhaustedError
from passforge.generators import PasswordGenerator, get_generator
from passforge.models import GenerationPolicy, SecretKind
from passforge.random_source import RandomSource, SeededRandomSource


class _ConstantSource(RandomSource):
    """Always draws index 0; never reaches class coverage on its own."""

    cryptographic = False

    def randbelow(self, n: int) -> int:
        return 0

    def spawn(self, n: int):
        return [_ConstantSource() for _ in range(n)]


def _policy_for(classes, length):
    return GenerationPolicy.password(
        length=length,
        include_lowercase=CANONICAL_ORDER[0] in classes,
        include_uppercase=CANONICAL_ORDER[1] in classes,
        include_digits=CANONICAL_ORDER[2] in classes,
        include_symbols=CANONICAL_ORDER[3] in classes,
    )


ALL_SUBSETS = [
    frozenset(combo)
    for size in range(1, 5)
    for combo in combinations(CANONICAL_ORDER, size)
]


class TestClassCoverage:
    """Every enabled class appears and nothing outside the alphabet does."""

    @pytest.mark.parametrize("classes", ALL_SUBSETS)
    def test_all_subsets(self, classes):
        generator = PasswordGenerator()
        rng = SeededRandomSource(len(classes))
        alphabet = build_alphabet(classes)
        for length in (len(classes), len(classes) + 1, 8, 20):
            policy = _policy_for(classes, length)
            for _ in range(25):
                value = generator.generate(policy, rng).value
                assert len(value) == length
                assert all(char in alphabet for char in value)
                assert {classify(char) for char in value} == set(classes)

    def test_minimum_feasible_length_is_permutation_of_classes(self):
        generator = PasswordGenerator()
        rng = SeededRandomSource(11)
        policy = GenerationPolicy.password(length=4)
        for _ in range(200):
            value = generator.generate(policy, rng).value
            assert sorted(classify(c).value for c in value) == sorted(
                cls.value for cls in CANONICAL_ORDER
            )

    def test_single_class(self):
        policy = GenerationPolicy.password(
            length=12,
            include_lowercase=False,
            include_uppercase=False,
            include_symbols=False,
        )
        value = PasswordGenerator().generate(policy, SeededRandomSource(0)).value
        assert value.isdigit()
        assert len(value) == 12


class TestLength:

    def test_ranged_length_covers_bounds(self):
        generator = PasswordGenerator()
        rng = SeededRandomSource(3)
        policy = GenerationPolicy.password(length=10, max_length=20)
        lengths = {generator.generate(policy, rng).length for _ in range(500)}
        assert lengths <= set(range(10, 21))
        assert {10, 20} <= lengths

    def test_equal_bounds_is_exact(self):
        policy = GenerationPolicy.password(length=12, max_length=12)
        secret = PasswordGenerator().generate(policy, SeededRandomSource(1))
        assert secret.length == 12


class TestDistribution:

    def test_every_character_reachable(self):
        policy = GenerationPolicy.password(
            length=1000,
            include_uppercase=False,
            include_digits=False,
            include_symbols=False,
        )
        value = PasswordGenerator().generate(policy, SeededRandomSource(9)).value
        assert set(value) == set(build_alphabet(policy.enabled_classes))

    def test_entropy_bits(self):
        policy = GenerationPolicy.password(length=10)
        secret = PasswordGenerator().generate(policy, SeededRandomSource(2))
        alphabet = build_alphabet(policy.enabled_classes)
        assert secret.entropy_bits == pytest.approx(10 * alphabet.bits_per_symbol)


class TestFailureModes:

    def test_defective_source_exhausts_repairs(self):
        policy = GenerationPolicy.password(length=12)
        generator = PasswordGenerator(max_repair_attempts=50)
        with pytest.raises(RngExhaustedError):
            generator.generate(policy, _ConstantSource())

    def test_constant_source_succeeds_when_no_repair_needed(self):
        policy = GenerationPolicy.password(
            length=5,
            include_uppercase=False,
            include_digits=False,
            include_symbols=False,
        )
        assert PasswordGenerator().generate(policy, _ConstantSource()).value == "aaaaa"

    def test_wrong_policy_kind(self):
        with pytest.raises(InvalidConfigError):
            PasswordGenerator().generate(GenerationPolicy.passphrase())


def test_same_seed_same_passwords():
    policy = GenerationPolicy.password(length=16)
    generator = PasswordGenerator()
    first = [generator.generate(policy, SeededRandomSource(5)).value for _ in range(3)]
    second = [generator.generate(policy, SeededRandomSource(5)).value for _ in range(3)]
    assert first == second


def test_system_source_used_by_default():
    secret = PasswordGenerator().generate(GenerationPolicy.password())
    assert secret.kind is SecretKind.PASSWORD
    assert secret.length == 18


def test_registry_lookup():
    assert isinstance(get_generator("password"), PasswordGenerator)
    with pytest.raises(InvalidConfigError, match="Unknown generator"):
        get_generator("pin")
