"""
Demonstration of batch generation and strength scoring.

Shows how to plug a custom evaluator into the batch orchestrator, compare
sequential and threaded runs, and inspect results as a DataFrame.
"""

import math
import time

from passforge import (
    BatchConfig,
    BatchOrchestrator,
    GenerationPolicy,
    PassphraseGenerator,
    PasswordGenerator,
    SeededRandomSource,
    StrengthEvaluator,
    StrengthReport,
    ZxcvbnEvaluator,
)
from passforge.charset import build_alphabet, classify
from passforge.strength import CrackTimes


class CharsetEntropyEvaluator(StrengthEvaluator):
    """
    Naive evaluator for demonstration.

    Estimates guesses as |alphabet| ** length, where the alphabet is the
    union of the classes present in the secret. Ignores patterns entirely,
    which is why zxcvbn is the default.
    """

    name = "charset_entropy"

    def evaluate(self, secret: str) -> StrengthReport:
        classes = {classify(c) for c in secret} - {None}
        size = build_alphabet(classes).size if classes else 1
        log10 = len(secret) * math.log10(size) if secret else 0.0
        score = min(4, int(log10 // 3))
        seconds = 10 ** log10 / 1e4
        return StrengthReport(
            score=score,
            guesses=10 ** log10,
            guesses_log10=log10,
            crack_times=CrackTimes(
                online_throttled_seconds=10 ** log10 / (100 / 3600),
                online_unthrottled_seconds=10 ** log10 / 10,
                offline_slow_hash_seconds=seconds,
                offline_fast_hash_seconds=10 ** log10 / 1e10,
                offline_slow_hash_display=f"{seconds:.3g} seconds",
            ),
        )


def _timed_run(workers: int, policy: GenerationPolicy, count: int):
    config = BatchConfig(count=count, evaluate_strength=True, workers=workers)
    orchestrator = BatchOrchestrator(PasswordGenerator(), ZxcvbnEvaluator(), config)
    start = time.perf_counter()
    result = orchestrator.run(policy, SeededRandomSource(42))
    return result, time.perf_counter() - start


def main():
    """Run batch demo."""
    print("=" * 80)
    print("Batch Generation Demo")
    print("=" * 80)

    # Step 1: Sequential vs threaded
    print("\n1. Scoring 200 passwords...")
    policy = GenerationPolicy.password(length=16)
    sequential, sequential_time = _timed_run(1, policy, 200)
    threaded, threaded_time = _timed_run(4, policy, 200)
    print(f"   1 worker:  {sequential_time:.2f}s")
    print(f"   4 workers: {threaded_time:.2f}s")
    print(f"   Score distribution: {threaded.summary()['score_distribution']}")

    # Step 2: Custom evaluator
    print("\n2. Comparing evaluators on weak passwords...")
    weak = GenerationPolicy.password(length=6, include_symbols=False)
    config = BatchConfig(count=5, evaluate_strength=True)
    naive = BatchOrchestrator(PasswordGenerator(), CharsetEntropyEvaluator(), config)
    result = naive.run(weak, SeededRandomSource(7))
    zxcvbn_evaluator = ZxcvbnEvaluator()
    for secret, report in result:
        reference = zxcvbn_evaluator.evaluate(secret.value)
        print(f"   naive={report.score}  zxcvbn={reference.score}")

    # Step 3: Passphrases as a DataFrame
    print("\n3. Passphrases...")
    config = BatchConfig(count=5, evaluate_strength=True)
    orchestrator = BatchOrchestrator(PassphraseGenerator(), zxcvbn_evaluator, config)
    result = orchestrator.run(GenerationPolicy.passphrase(word_count=5, capitalize=True))
    df = result.to_dataframe()
    print(df[["length", "entropy_bits", "score", "crack_time"]].to_string(index=False))

    print("\n" + "=" * 80)
    print("Demo complete!")
    print("=" * 80)


if __name__ == "__main__":
    main()
