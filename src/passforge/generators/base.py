"""
Base generator interface.

Password and passphrase generators implement this contract so the batch
orchestrator and CLI can drive either one the same way.
"""

from abc import ABC, abstractmethod
from typing import Optional

from ..errors import InvalidConfigError
from ..models import GeneratedSecret, GenerationPolicy, SecretKind
from ..random_source import RandomSource, default_source


class BaseGenerator(ABC):
    """
    Abstract base class for secret generators.

    Generators hold no per-call state: every call to generate() consumes only
    the policy and the random source it is handed, so one instance can be
    shared across worker threads as long as each worker has its own source.
    """

    kind: SecretKind

    @abstractmethod
    def generate(
        self,
        policy: GenerationPolicy,
        rng: Optional[RandomSource] = None,
    ) -> GeneratedSecret:
        """
        Produce one secret for ``policy``.

        Args:
            policy: Validated generation policy of this generator's kind
            rng: Random source (a fresh SystemRandomSource if None)

        Returns:
            GeneratedSecret
        """
        pass

    def prepare(self, policy: GenerationPolicy) -> GenerationPolicy:
        """
        Hook run once before a batch; returns the policy to generate from.

        The default checks the policy kind and returns it unchanged.
        """
        self._check_policy(policy)
        return policy

    def _check_policy(self, policy: GenerationPolicy) -> None:
        if policy.kind is not self.kind:
            raise InvalidConfigError(
                f"{self.__class__.__name__} cannot generate from a "
                f"{policy.kind.value} policy"
            )

    @staticmethod
    def _resolve_rng(rng: Optional[RandomSource]) -> RandomSource:
        return rng if rng is not None else default_source()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(kind={self.kind.value})"
