from .errors import BaseOptionSchemaException, InvalidArgument, RangeExceeded
from .models import (
    ApplicationCommandOptionType,
    ChannelType,
    Choice,
    Option,
    factory
)
from .project import Project, project
from .version import VERSION
from .core import configure


__all__ = (
    'ApplicationCommandOptionType',
    'BaseOptionSchemaException',
    'ChannelType',
    'Choice',
    'InvalidArgument',
    'Option',
    'Project',
    'RangeExceeded',
    'VERSION',
    'configure',
    'factory',
    'project',
)
