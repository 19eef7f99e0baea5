"""
Pytest fixtures shared by the descriptor tests.
Provides small payload models, strategies built on them and loaders that count their invocations.
"""

from typing import Literal

import pytest
from pydantic import BaseModel, ConfigDict, Field

from mlform.descriptors import DescriptorItem, DescriptorRegistry, DescriptorService, DescriptorStrategy, Slot


class AlphaPayload(BaseModel):
    model_config = ConfigDict(extra="forbid")

    type: Literal["alpha"]
    label: str


class BetaPayload(BaseModel):
    model_config = ConfigDict(extra="forbid")

    type: Literal["beta"]
    count: int = Field(ge=0)


class GammaPayload(BaseModel):
    model_config = ConfigDict(extra="forbid")

    type: Literal["gamma"]
    score: float


class CountingLoader:
    """ Loader that records how many times it was invoked. Invocation is counted when called, before the coroutine runs. """

    def __init__(self, error: Exception | None = None):
        self.calls = 0
        self.error = error

    def __call__(self):
        self.calls += 1
        return self._load()

    async def _load(self) -> None:
        if self.error is not None:
            raise self.error


class InputStrategy(DescriptorStrategy):
    """ Emits one <type-control> node holding every payload field except type. """

    def build_descriptor(self, payload: BaseModel) -> DescriptorItem:
        return DescriptorItem(
            tag=f"{payload.type}-control",
            props=payload.model_dump(exclude={"type"}),
            slot=Slot.INPUTS,
        )


class OutputStrategy(DescriptorStrategy):
    def build_descriptor(self, payload: BaseModel) -> DescriptorItem:
        return DescriptorItem(
            tag=f"{payload.type}-report",
            props=payload.model_dump(exclude={"type"}),
            slot=Slot.REPORT,
        )


@pytest.fixture
def alpha_strategy():
    return InputStrategy("alpha", AlphaPayload, CountingLoader())


@pytest.fixture
def beta_strategy():
    return InputStrategy("beta", BetaPayload, CountingLoader())


@pytest.fixture
def gamma_strategy():
    return OutputStrategy("gamma", GammaPayload, CountingLoader())


@pytest.fixture
def registry(alpha_strategy, beta_strategy):
    return DescriptorRegistry([alpha_strategy, beta_strategy])


@pytest.fixture
def baseline_loader():
    return CountingLoader()


@pytest.fixture
def service(registry, baseline_loader):
    return DescriptorService(registry, baseline_loaders=[baseline_loader])
