"""
Batch orchestrator for generating many secrets.

Requests N independent secrets from one generator, optionally scores each
one, and keeps secret -> report correspondence by position. With more than
one worker the request range is split into contiguous chunks, one per
thread, and every thread draws from its own spawned random source.
"""

import logging
import threading
from concurrent.futures import FIRST_EXCEPTION, ThreadPoolExecutor, wait
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional, Tuple

import numpy as np
import pandas as pd
from tqdm import tqdm

from ..errors import InvalidConfigError
from ..generators import BaseGenerator
from ..models import GeneratedSecret, GenerationPolicy
from ..random_source import RandomSource, default_source
from ..strength import StrengthEvaluator, StrengthReport

logger = logging.getLogger(__name__)


@dataclass
class BatchConfig:
    """Configuration for a generation batch."""
    count: int = 1
    evaluate_strength: bool = False
    workers: int = 1
    show_progress: bool = False


@dataclass
class BatchResult:
    """Secrets in request order, with reports at matching positions."""
    secrets: List[GeneratedSecret] = field(default_factory=list)
    reports: Optional[List[StrengthReport]] = None

    def __len__(self) -> int:
        return len(self.secrets)

    def __iter__(self) -> Iterator[Tuple[GeneratedSecret, Optional[StrengthReport]]]:
        reports = self.reports if self.reports is not None else [None] * len(self.secrets)
        return iter(zip(self.secrets, reports))

    @property
    def values(self) -> List[str]:
        return [secret.value for secret in self.secrets]

    def to_dataframe(self) -> pd.DataFrame:
        """
        Convert to a DataFrame for display or export.

        Columns: index, kind, secret, length, entropy_bits and, when scored,
        score, tier, guesses_log10, crack_time, warning.
        """
        rows = []
        for index, (secret, report) in enumerate(self):
            row: Dict[str, Any] = {
                "index": index,
                "kind": secret.kind.value,
                "secret": secret.value,
                "length": secret.length,
                "entropy_bits": secret.entropy_bits,
            }
            if report is not None:
                row.update({
                    "score": report.score,
                    "tier": report.tier.label,
                    "guesses_log10": report.guesses_log10,
                    "crack_time": report.crack_times.offline_slow_hash_display,
                    "warning": report.warning,
                })
            rows.append(row)
        return pd.DataFrame(rows)

    def summary(self) -> Dict[str, Any]:
        """Aggregate statistics (never includes the secrets themselves)."""
        entropy = np.array([secret.entropy_bits for secret in self.secrets], dtype=float)
        stats: Dict[str, Any] = {
            "count": len(self.secrets),
            "mean_entropy_bits": float(entropy.mean()) if entropy.size else 0.0,
            "min_entropy_bits": float(entropy.min()) if entropy.size else 0.0,
        }
        if self.reports is not None:
            scores = pd.Series([report.score for report in self.reports], dtype=int)
            stats["score_distribution"] = {
                int(score): int(n) for score, n in scores.value_counts().sort_index().items()
            }
        return stats


class BatchOrchestrator:
    """
    Runs a generator repeatedly and aggregates results.

    The first failure aborts the whole batch; partial batches are never
    returned.
    """

    def __init__(
        self,
        generator: BaseGenerator,
        evaluator: Optional[StrengthEvaluator] = None,
        config: Optional[BatchConfig] = None,
    ):
        """
        Initialize orchestrator.

        Args:
            generator: Generator to drive
            evaluator: Evaluator used when config.evaluate_strength is set
            config: Batch configuration (uses defaults if None)
        """
        self.generator = generator
        self.evaluator = evaluator
        self.config = config or BatchConfig()

    def run(self, policy: GenerationPolicy, rng: Optional[RandomSource] = None) -> BatchResult:
        """
        Generate ``config.count`` secrets for ``policy``.

        Raises:
            InvalidConfigError: If count or workers is below 1, or scoring is
                requested without an evaluator
            PassforgeError: The first generation failure, re-raised
        """
        count = self.config.count
        workers = self.config.workers
        if count < 1:
            raise InvalidConfigError(f"Count cannot be smaller than 1 (got {count})")
        if workers < 1:
            raise InvalidConfigError(f"Workers cannot be smaller than 1 (got {workers})")
        evaluator = self.evaluator if self.config.evaluate_strength else None
        if self.config.evaluate_strength and evaluator is None:
            raise InvalidConfigError("Strength evaluation requested without an evaluator")

        rng = rng if rng is not None else default_source()
        policy = self.generator.prepare(policy)

        secrets: List[Optional[GeneratedSecret]] = [None] * count
        reports: Optional[List[Optional[StrengthReport]]] = [None] * count if evaluator else None

        workers = min(workers, count)
        with tqdm(total=count, desc="Generating", unit="secret",
                  disable=not self.config.show_progress) as pbar:
            if workers == 1:
                self._run_chunk(policy, rng, range(count), secrets, reports, evaluator, pbar)
            else:
                self._run_parallel(policy, rng, workers, secrets, reports, evaluator, pbar)

        logger.info(
            "Generated %d %s(s)%s",
            count,
            policy.kind.value,
            " with strength reports" if evaluator else "",
        )
        return BatchResult(secrets=secrets, reports=reports)

    def _run_parallel(
        self,
        policy: GenerationPolicy,
        rng: RandomSource,
        workers: int,
        secrets: List[Optional[GeneratedSecret]],
        reports: Optional[List[Optional[StrengthReport]]],
        evaluator: Optional[StrengthEvaluator],
        pbar: tqdm,
    ) -> None:
        chunks = split_range(len(secrets), workers)
        worker_rngs = rng.spawn(len(chunks))
        cancelled = threading.Event()
        logger.debug("Split %d requests into %d chunks", len(secrets), len(chunks))

        with ThreadPoolExecutor(max_workers=len(chunks)) as executor:
            futures = [
                executor.submit(
                    self._run_chunk, policy, worker_rng, chunk,
                    secrets, reports, evaluator, pbar, cancelled,
                )
                for chunk, worker_rng in zip(chunks, worker_rngs)
            ]
            done, pending = wait(futures, return_when=FIRST_EXCEPTION)
            failed = [f for f in futures if f in done and f.exception() is not None]
            if failed:
                cancelled.set()
                for future in pending:
                    future.cancel()
                raise failed[0].exception()

    def _run_chunk(
        self,
        policy: GenerationPolicy,
        rng: RandomSource,
        indices: range,
        secrets: List[Optional[GeneratedSecret]],
        reports: Optional[List[Optional[StrengthReport]]],
        evaluator: Optional[StrengthEvaluator],
        pbar: tqdm,
        cancelled: Optional[threading.Event] = None,
    ) -> None:
        """Fill ``secrets`` (and ``reports``) at ``indices``; each index has one writer."""
        for index in indices:
            if cancelled is not None and cancelled.is_set():
                return
            secret = self.generator.generate(policy, rng)
            secrets[index] = secret
            if evaluator is not None:
                reports[index] = evaluator.evaluate(secret.value)
            pbar.update(1)


def split_range(count: int, parts: int) -> List[range]:
    """Split [0, count) into at most ``parts`` contiguous, near-equal ranges."""
    parts = max(1, min(parts, count))
    size, extra = divmod(count, parts)
    chunks = []
    start = 0
    for i in range(parts):
        stop = start + size + (1 if i < extra else 0)
        chunks.append(range(start, stop))
        start = stop
    return chunks


def generate_many(
    generator: BaseGenerator,
    policy: GenerationPolicy,
    count: int,
    rng: Optional[RandomSource] = None,
    evaluator: Optional[StrengthEvaluator] = None,
    workers: int = 1,
    show_progress: bool = False,
) -> BatchResult:
    """
    Convenience function to generate a batch.

    Args:
        generator: Generator variant to use
        policy: Validated policy
        count: Number of secrets
        rng: Random source (fresh SystemRandomSource if None)
        evaluator: If given, every secret is scored in the same pass
        workers: Worker threads (each gets its own random source)
        show_progress: Show a tqdm progress bar on stderr

    Returns:
        BatchResult
    """
    config = BatchConfig(
        count=count,
        evaluate_strength=evaluator is not None,
        workers=workers,
        show_progress=show_progress,
    )
    return BatchOrchestrator(generator, evaluator, config).run(policy, rng)
