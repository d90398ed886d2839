"""Shared fixtures: provider sets that never touch the network."""

import pytest

from core.knowledge import KnowledgeStore
from core.providers import ProviderSet
from core.selector import RandomTermSelector
from tests.helpers import FirstChoiceRandom
from tools.registry import ToolContext


@pytest.fixture
def offline_providers() -> ProviderSet:
    return ProviderSet.offline()


@pytest.fixture
def store() -> KnowledgeStore:
    return KnowledgeStore()


@pytest.fixture
def tool_context(offline_providers, store) -> ToolContext:
    return ToolContext(
        providers=offline_providers,
        store=store,
        selector=RandomTermSelector(pool=["çay", "misafir", "nazar", "kitap"], rng=FirstChoiceRandom()),
    )
