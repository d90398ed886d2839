"""Test helpers: deterministic rng and fake provider adapters."""

import random
from dataclasses import replace

from core.models import ProviderResult
from core.providers import ProviderSet


class FirstChoiceRandom(random.Random):
    """Deterministic rng: always the first candidate, never shuffles."""

    def choice(self, seq):
        return seq[0]

    def shuffle(self, x, *args, **kwargs):
        return None

    def random(self):
        return 0.0


def returning(result: ProviderResult, calls: list = None):
    """An adapter that records its arguments and returns `result`."""

    async def adapter(*args):
        if calls is not None:
            calls.append(args)
        return result

    return adapter


def providers_with(**adapters) -> ProviderSet:
    """All-unavailable ProviderSet with some adapters replaced."""
    return replace(ProviderSet.offline(), **adapters)
