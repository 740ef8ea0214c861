"""Base use case."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from pydantic import BaseModel

RequestT = TypeVar("RequestT", bound=BaseModel)
ResponseT = TypeVar("ResponseT", bound=BaseModel)


class BaseUseCase(ABC, Generic[RequestT, ResponseT]):
    """Orchestrates domain services for one external operation.

    Requests carry IDs as strings along with the acting user's ID. Domain
    errors raised by the services propagate unchanged.
    """

    @abstractmethod
    async def execute(self, request: RequestT) -> ResponseT:
        pass
