from pydantic import BaseModel, ConfigDict
from typing import Any, Self
from .factory import factory


__all__ = ('RawBaseModel',)


class RawBaseModel(BaseModel):
    # ? only declared fields may be set, on construction or assignment
    model_config = ConfigDict(
        extra='forbid',
        validate_assignment=True
    )

    @classmethod
    def fillable(cls) -> frozenset[str]:
        return frozenset(
            field.alias or name
            for name, field in cls.model_fields.items()
        )

    @classmethod
    def from_raw(cls, data: dict[str, Any]) -> Self:
        return factory.create(cls, data)

    def as_raw(self) -> dict[str, Any]:
        """Snapshot of the fields that were set, in wire shape.

        Enums become their values and nothing in the result is shared
        with the model, so later mutation of either side is not seen by
        the other.
        """
        return self.model_dump(
            mode='json',
            by_alias=True,
            exclude_unset=True,
            exclude_none=True
        )
