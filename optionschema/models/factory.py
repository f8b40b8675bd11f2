from __future__ import annotations
from typing import Any, TypeVar, TYPE_CHECKING

if TYPE_CHECKING:
    from .base import RawBaseModel


__all__ = ('Factory', 'factory')

T = TypeVar('T', bound='RawBaseModel')


class Factory:
    """Builds models from raw records.

    Nothing is cached; every call validates a fresh instance.
    """

    def create(self, cls: type[T], data: dict[str, Any]) -> T:
        return cls.model_validate(data)


factory = Factory()
