"""
passforge: random password and passphrase generation with strength scoring.

Usage:
    from passforge import GenerationPolicy, PasswordGenerator, ZxcvbnEvaluator

    policy = GenerationPolicy.password(length=16)
    secret = PasswordGenerator().generate(policy)
    print(secret.value)

    report = ZxcvbnEvaluator().evaluate(secret.value)
    print(f"Score: {report.score}/4")

    # Many at once, scored in the same pass
    from passforge import PassphraseGenerator, generate_many

    result = generate_many(
        PassphraseGenerator(),
        GenerationPolicy.passphrase(word_count=6, separator="_"),
        count=5,
        evaluator=ZxcvbnEvaluator(),
    )
    for secret, report in result:
        print(secret.value, report.score)
"""

__version__ = "0.2.0"

from .errors import (
    PassforgeError,
    EmptyAlphabetError,
    PolicyUnsatisfiableError,
    WordListTooSmallError,
    WordListLoadError,
    RngExhaustedError,
    InvalidConfigError,
)
from .random_source import (
    RandomSource,
    SystemRandomSource,
    SeededRandomSource,
    default_source,
)
from .charset import (
    Alphabet,
    CharacterClass,
    build_alphabet,
    classes_for,
)
from .wordlist import WordList
from .models import (
    GenerationPolicy,
    GeneratedSecret,
    SecretKind,
)
from .generators import (
    BaseGenerator,
    PasswordGenerator,
    PassphraseGenerator,
    get_generator,
)
from .strength import (
    StrengthEvaluator,
    StrengthReport,
    ScoreTier,
    ZxcvbnEvaluator,
    get_evaluator,
)
from .batching import (
    BatchConfig,
    BatchOrchestrator,
    BatchResult,
    generate_many,
)
from .config import (
    Preset,
    get_preset_policy,
    load_settings,
)

__all__ = [
    # Errors
    "PassforgeError",
    "EmptyAlphabetError",
    "PolicyUnsatisfiableError",
    "WordListTooSmallError",
    "WordListLoadError",
    "RngExhaustedError",
    "InvalidConfigError",
    # Randomness
    "RandomSource",
    "SystemRandomSource",
    "SeededRandomSource",
    "default_source",
    # Character sets and words
    "Alphabet",
    "CharacterClass",
    "build_alphabet",
    "classes_for",
    "WordList",
    # Models
    "GenerationPolicy",
    "GeneratedSecret",
    "SecretKind",
    # Generators
    "BaseGenerator",
    "PasswordGenerator",
    "PassphraseGenerator",
    "get_generator",
    # Strength
    "StrengthEvaluator",
    "StrengthReport",
    "ScoreTier",
    "ZxcvbnEvaluator",
    "get_evaluator",
    # Batching
    "BatchConfig",
    "BatchOrchestrator",
    "BatchResult",
    "generate_many",
    # Config
    "Preset",
    "get_preset_policy",
    "load_settings",
]
