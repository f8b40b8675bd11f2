from __future__ import annotations
from contextlib import contextmanager
from typing import Iterator
from pathlib import Path
import inspect
import pydantic
import logfire


__all__ = (
    'BaseOptionSchemaException',
    'InvalidArgument',
    'RangeExceeded',
    'rejecting',
)

# ? frames under these are skipped when looking for the caller
_INTERNAL_DIRS = tuple(
    str(Path(module.__file__).parent.absolute())
    for module in (inspect, pydantic, logfire)
    if module.__file__ is not None
) + (str(Path(__file__).parent.absolute()),)


def caller_stack_info() -> dict[str, str | int]:
    """logfire `code.*` attributes for the nearest frame outside the package."""
    frame = inspect.currentframe()

    while frame is not None:
        path = Path(frame.f_code.co_filename).absolute()

        if not str(path).startswith(_INTERNAL_DIRS):
            if path.is_relative_to(Path.cwd()):
                path = path.relative_to(Path.cwd())

            return {
                'code.filepath': str(path),
                'code.lineno': frame.f_lineno,
                'code.function': frame.f_code.co_qualname
            }

        frame = frame.f_back

    return {}


class BaseOptionSchemaException(Exception):
    def __init__(self, *args, **kwargs) -> None:
        self._stack_info = caller_stack_info()
        super().__init__(*args, **kwargs)


class InvalidArgument(BaseOptionSchemaException, ValueError):
    ...


class RangeExceeded(BaseOptionSchemaException, ValueError):
    ...


@contextmanager
def rejecting(operation: str) -> Iterator[None]:
    """Log a failed precondition inside the block, then re-raise it."""
    try:
        yield
    except BaseOptionSchemaException as error:
        logfire.debug(
            '{operation} rejected: {reason}',
            operation=operation,
            reason=str(error),
            **error._stack_info  # type: ignore #? mypy stupid
        )
        raise
