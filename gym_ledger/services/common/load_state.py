"""
Availability of externally fetched inputs.

A numeric default of 0 cannot tell "not fetched yet" from "fetched and
zero". Engines that render defaults take a LoadState instead.
"""

from dataclasses import dataclass
from typing import Any, Generic, Optional, TypeVar

from gym_ledger.schemas.common.enums import LoadStatus

T = TypeVar("T")


@dataclass(frozen=True)
class LoadState(Generic[T]):
    """
    Tri-state wrapper: UNLOADED, LOADED(value) or FAILED(error).

    Attributes:
        status: Current availability
        value: Fetched value (LOADED only)
        error: Fetch error (FAILED only)
    """

    status: LoadStatus
    value: Optional[T] = None
    error: Optional[Any] = None

    @classmethod
    def unloaded(cls) -> "LoadState[T]":
        return cls(status=LoadStatus.UNLOADED)

    @classmethod
    def loaded(cls, value: T) -> "LoadState[T]":
        return cls(status=LoadStatus.LOADED, value=value)

    @classmethod
    def failed(cls, error: Any) -> "LoadState[T]":
        return cls(status=LoadStatus.FAILED, error=error)

    @property
    def is_loaded(self) -> bool:
        return self.status == LoadStatus.LOADED

    @property
    def is_failed(self) -> bool:
        return self.status == LoadStatus.FAILED

    def value_or(self, default: T) -> T:
        """Loaded value, or default while unloaded or failed."""
        return self.value if self.is_loaded else default
