from __future__ import annotations
from optionschema.errors import InvalidArgument, rejecting
from optionschema.utils import text_length
from pydantic import field_validator
from .base import RawBaseModel
from typing import Any


__all__ = ('Choice',)

MAX_CHOICE_NAME_LENGTH = 100
MAX_CHOICE_VALUE_LENGTH = 100


def _check_name(name: str) -> None:
    if not 1 <= text_length(name) <= MAX_CHOICE_NAME_LENGTH:
        raise InvalidArgument(
            f'Choice name must be between 1 and {MAX_CHOICE_NAME_LENGTH} characters.')


def _check_value(value: str | int | float) -> None:
    if isinstance(value, str) and text_length(value) > MAX_CHOICE_VALUE_LENGTH:
        raise InvalidArgument(
            f'Choice value must be less than or equal to {MAX_CHOICE_VALUE_LENGTH} characters.')


class Choice(RawBaseModel):
    name: str | None = None
    name_localizations: dict[str, str] | None = None
    value: str | int | float | None = None

    @field_validator('name')
    @classmethod
    def _validate_name(cls, name: str | None) -> str | None:
        if name is not None:
            _check_name(name)

        return name

    @field_validator('value')
    @classmethod
    def _validate_value(cls, value: str | int | float | None) -> str | int | float | None:
        if value is not None:
            _check_value(value)

        return value

    @classmethod
    def new(cls, name: str, value: str | int | float) -> Choice:
        return cls().set_name(name).set_value(value)

    def set_name(self, name: str) -> Choice:
        with rejecting('set_name'):
            _check_name(name)

        self.name = name
        return self

    def set_value(self, value: str | int | float) -> Choice:
        with rejecting('set_value'):
            _check_value(value)

        self.value = value
        return self

    def as_payload(self) -> dict[str, Any]:
        if self.name is None or self.value is None:
            raise InvalidArgument('name and value are required for choice payload')

        return self.as_raw()
