"""Base use case."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

RequestT = TypeVar("RequestT")
ResponseT = TypeVar("ResponseT")


class BaseUseCase(ABC, Generic[RequestT, ResponseT]):
    """One actor-facing membership operation.

    Use cases translate API-shaped requests into domain service calls and
    domain results back into response items. Authorization and invariants
    live in the domain services they call.
    """

    @abstractmethod
    async def execute(self, request: RequestT) -> ResponseT:
        pass
