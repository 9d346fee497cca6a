"""Data source protocols and callable adapters."""

from collections.abc import Awaitable, Callable
from typing import Generic, Protocol, TypeVar, runtime_checkable

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)


@runtime_checkable
class DataSource(Protocol[T_co]):
    """Sync data source recomputing a value on demand."""

    def read(self, id: int) -> T_co:
        """Produce a fresh value for ``id``."""
        ...


@runtime_checkable
class AsyncDataSource(Protocol[T_co]):
    """Async data source recomputing a value on demand."""

    async def read(self, id: int) -> T_co:
        """Produce a fresh value for ``id``."""
        ...


class FunctionSource(Generic[T]):
    """Adapts a plain function of the id to a DataSource."""

    def __init__(self, fn: Callable[[int], T]) -> None:
        self._fn = fn

    def read(self, id: int) -> T:
        return self._fn(id)


class AsyncFunctionSource(Generic[T]):
    """Adapts a coroutine function of the id to an AsyncDataSource."""

    def __init__(self, fn: Callable[[int], Awaitable[T]]) -> None:
        self._fn = fn

    async def read(self, id: int) -> T:
        return await self._fn(id)
