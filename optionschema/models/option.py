from __future__ import annotations
from optionschema.errors import InvalidArgument, RangeExceeded, rejecting
from .enums import ApplicationCommandOptionType
from pydantic import Field, field_validator
from collections.abc import Iterable
from optionschema.utils import text_length
from .base import RawBaseModel
from .factory import factory
from regex import fullmatch
from .choice import Choice
from orjson import dumps
from typing import Any
import logfire


__all__ = ('Option',)

COMMAND_NAME_PATTERN = r'^[-_\p{L}\p{N}\p{Script=Devanagari}\p{Script=Thai}]{1,32}$'
MAX_NAME_LENGTH = 32
MAX_DESCRIPTION_LENGTH = 100
MAX_OPTIONS = 25
MAX_CHOICES = 25


def _check_type(type: int) -> None:
    # ? bool is an int subclass, True would pass as SUB_COMMAND
    if isinstance(type, bool) or not 1 <= type <= 10:
        raise InvalidArgument('Invalid type provided.')


def _check_length(value: str | None, limit: int, field: str) -> None:
    # ? empty strings are treated as unset and skip the check
    if value and text_length(value) > limit:
        raise InvalidArgument(
            f'{field} must be less than or equal to {limit} characters.')


def _without_name(
    records: list[dict[str, Any]] | None,
    name: str | None
) -> list[dict[str, Any]] | None:
    """Copy of records minus the first one named `name`, None if none match."""
    records = records or []

    for index, record in enumerate(records):
        if record.get('name') == name:
            return records[:index] + records[index+1:]

    return None


class Option(RawBaseModel):
    """A parameter, sub-command or sub-command group of an application command.

    `choices` and `options` are stored as raw records captured when they
    were attached; the properties of the same names build fresh models
    from those records on every access.
    """
    type: ApplicationCommandOptionType | None = None
    name: str | None = None
    description: str | None = None
    required: bool = False
    raw_choices: list[dict[str, Any]] | None = Field(None, alias='choices')
    raw_options: list[dict[str, Any]] | None = Field(None, alias='options')
    channel_types: list[int] | None = None
    min_value: int | float | None = None
    max_value: int | float | None = None
    autocomplete: bool = False

    @field_validator('name')
    @classmethod
    def _validate_name(cls, name: str | None) -> str | None:
        _check_length(name, MAX_NAME_LENGTH, 'Name')
        return name

    @field_validator('description')
    @classmethod
    def _validate_description(cls, description: str | None) -> str | None:
        _check_length(description, MAX_DESCRIPTION_LENGTH, 'Description')
        return description

    @field_validator('raw_choices')
    @classmethod
    def _validate_choices(
        cls,
        choices: list[dict[str, Any]] | None
    ) -> list[dict[str, Any]] | None:
        if choices is None:
            return None

        if len(choices) > MAX_CHOICES:
            raise RangeExceeded(
                f'Option can only have a maximum of {MAX_CHOICES} choices.')

        # ? rebuilt so bad records fail here instead of on first read
        return [
            factory.create(Choice, choice).as_raw()
            for choice in choices
        ]

    @field_validator('raw_options')
    @classmethod
    def _validate_options(
        cls,
        options: list[dict[str, Any]] | None
    ) -> list[dict[str, Any]] | None:
        if options is None:
            return None

        if len(options) > MAX_OPTIONS:
            raise RangeExceeded(
                f'Option can not have more than {MAX_OPTIONS} parameters.')

        return [
            factory.create(Option, option).as_raw()
            for option in options
        ]

    @property
    def choices(self) -> list[Choice] | None:
        # ? None means never configured, [] means configured empty
        if self.raw_choices is None:
            return None

        return [
            factory.create(Choice, choice)
            for choice in self.raw_choices
        ]

    @property
    def options(self) -> list[Option]:
        return [
            factory.create(Option, option)
            for option in self.raw_options or []
        ]

    def set_type(self, type: int) -> Option:
        with rejecting('set_type'):
            _check_type(type)

        self.type = ApplicationCommandOptionType(type)
        return self

    def set_name(self, name: str) -> Option:
        with rejecting('set_name'):
            _check_length(name, MAX_NAME_LENGTH, 'Name')

        self.name = name
        return self

    def set_description(self, description: str) -> Option:
        with rejecting('set_description'):
            _check_length(description, MAX_DESCRIPTION_LENGTH, 'Description')

        self.description = description
        return self

    def set_required(self, required: bool) -> Option:
        self.required = required
        return self

    def set_channel_types(self, types: Iterable[int]) -> Option:
        self.channel_types = list(types)
        return self

    def set_min_value(self, min_value: int | float) -> Option:
        # ? int for INTEGER options, float for NUMBER options; not checked
        self.min_value = min_value
        return self

    def set_max_value(self, max_value: int | float) -> Option:
        self.max_value = max_value
        return self

    def set_autocomplete(self, autocomplete: bool) -> Option:
        # ? add_choice does not check the reverse
        with rejecting('set_autocomplete'):
            if autocomplete and self.raw_choices:
                raise InvalidArgument(
                    'Autocomplete may not be set to true if choices are present.')

        self.autocomplete = autocomplete
        return self

    def add_option(self, option: Option) -> Option:
        with rejecting('add_option'):
            if len(self.raw_options or []) >= MAX_OPTIONS:
                raise RangeExceeded(
                    f'Option can not have more than {MAX_OPTIONS} parameters.')

        self.raw_options = [*(self.raw_options or []), option.as_raw()]

        logfire.debug(
            'attached option {option_name} to {parent_name}',
            option_name=option.name,
            parent_name=self.name
        )

        return self

    def add_choice(self, choice: Choice) -> Option:
        with rejecting('add_choice'):
            if len(self.raw_choices or []) >= MAX_CHOICES:
                raise RangeExceeded(
                    f'Option can only have a maximum of {MAX_CHOICES} choices.')

        self.raw_choices = [*(self.raw_choices or []), choice.as_raw()]

        logfire.debug(
            'attached choice {choice_name} to {parent_name}',
            choice_name=choice.name,
            parent_name=self.name
        )

        return self

    def remove_option(self, option: Option) -> Option:
        remaining = _without_name(self.raw_options, option.name)

        if remaining is None:
            logfire.debug(
                'no option named {option_name} on {parent_name}, nothing removed',
                option_name=option.name,
                parent_name=self.name
            )
            return self

        self.raw_options = remaining
        return self

    def remove_choice(self, choice: Choice) -> Option:
        remaining = _without_name(self.raw_choices, choice.name)

        if remaining is None:
            logfire.debug(
                'no choice named {choice_name} on {parent_name}, nothing removed',
                choice_name=choice.name,
                parent_name=self.name
            )
            return self

        self.raw_choices = remaining
        return self

    def as_payload(self) -> dict[str, Any]:
        """Raw field map for sending, after checking the tree is complete.

        Every node needs a type, a valid name and a description; choices
        and sub-options may only appear on the types that take them.
        """
        if self.type is None or not self.name or not self.description:
            raise InvalidArgument(
                'type, name, and description are required for option payload')

        if fullmatch(COMMAND_NAME_PATTERN, self.name) is None:
            raise InvalidArgument(f'Invalid option name `{self.name}`.')

        if self.raw_choices and not self.type.accepts_choices:
            raise InvalidArgument(
                f'{self.type.name} options can not have choices.')

        if self.raw_options and not self.type.accepts_options:
            raise InvalidArgument(
                f'{self.type.name} options can not have sub-options.')

        for choice in self.choices or []:
            choice.as_payload()

        for option in self.options:
            option.as_payload()

        return self.as_raw()

    def to_json(self) -> bytes:
        return dumps(self.as_payload())
