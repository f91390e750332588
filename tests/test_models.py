"""
Tests for GenerationPolicy validation and GeneratedSecret.
"""

import dataclasses

import pytest

from passforge.charset import CharacterClass
from passforge.errors import (
    EmptyAlphabetError,
    PassforgeError,
    PolicyUnsatisfiableError,
)
from passforge.models import (
    DEFAULT_LENGTH,
    DEFAULT_SEPARATOR,
    DEFAULT_WORD_COUNT,
    GeneratedSecret,
    GenerationPolicy,
    SecretKind,
)
from passforge.wordlist import WordList


class TestPasswordPolicy:
    """Validation at construction."""

    def test_defaults(self):
        policy = GenerationPolicy.password()
        assert policy.kind is SecretKind.PASSWORD
        assert policy.length == DEFAULT_LENGTH
        assert policy.enabled_classes == frozenset(CharacterClass)
        assert not policy.is_ranged

    def test_no_classes_enabled(self):
        with pytest.raises(EmptyAlphabetError):
            GenerationPolicy.password(
                include_lowercase=False,
                include_uppercase=False,
                include_digits=False,
                include_symbols=False,
            )

    @pytest.mark.parametrize("length", [0, -1])
    def test_non_positive_length(self, length):
        with pytest.raises(PolicyUnsatisfiableError):
            GenerationPolicy.password(length=length)

    def test_length_shorter_than_class_count(self):
        with pytest.raises(PolicyUnsatisfiableError):
            GenerationPolicy.password(length=3)
        GenerationPolicy.password(length=4)
        GenerationPolicy.password(length=2, include_digits=False, include_symbols=False)

    def test_max_length_below_length(self):
        with pytest.raises(PolicyUnsatisfiableError):
            GenerationPolicy.password(length=10, max_length=9)

    def test_ranged(self):
        assert GenerationPolicy.password(length=10, max_length=20).is_ranged
        assert not GenerationPolicy.password(length=10, max_length=10).is_ranged

    def test_errors_share_base_class(self):
        with pytest.raises(PassforgeError):
            GenerationPolicy.password(length=0)

    def test_frozen(self):
        policy = GenerationPolicy.password()
        with pytest.raises(dataclasses.FrozenInstanceError):
            policy.length = 5


class TestPassphrasePolicy:

    def test_defaults(self):
        policy = GenerationPolicy.passphrase()
        assert policy.kind is SecretKind.PASSPHRASE
        assert policy.word_count == DEFAULT_WORD_COUNT
        assert policy.separator == DEFAULT_SEPARATOR
        assert policy.word_list is None

    def test_zero_words(self):
        with pytest.raises(PolicyUnsatisfiableError):
            GenerationPolicy.passphrase(word_count=0)

    def test_password_flags_ignored(self):
        policy = GenerationPolicy.passphrase(
            include_lowercase=False,
            include_uppercase=False,
            include_digits=False,
            include_symbols=False,
        )
        assert policy.word_count == DEFAULT_WORD_COUNT

    def test_with_word_list(self):
        word_list = WordList.from_words(["eagle", "stone"])
        policy = GenerationPolicy.passphrase(word_count=5).with_word_list(word_list)
        assert policy.word_list is word_list
        assert policy.word_count == 5

    def test_to_dict(self):
        word_list = WordList.from_words(["eagle"], source="custom.txt")
        data = GenerationPolicy.passphrase(word_list=word_list, capitalize=True).to_dict()
        assert data == {
            "kind": "passphrase",
            "word_count": DEFAULT_WORD_COUNT,
            "separator": DEFAULT_SEPARATOR,
            "word_list": "custom.txt",
            "capitalize": True,
            "include_number": False,
        }


def test_from_preset():
    policy = GenerationPolicy.from_preset("Strong", SecretKind.PASSWORD)
    assert policy.length == 32


def test_generated_secret():
    secret = GeneratedSecret(value="abc", kind=SecretKind.PASSWORD, entropy_bits=12.5)
    assert secret.length == 3
    assert str(secret) == "abc"
