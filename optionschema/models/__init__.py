from .base import *
from .choice import *
from .enums import *
from .factory import *
from .option import *


__all__ = (
    # base.py
    'RawBaseModel',
    # choice.py
    'Choice',
    # enums.py
    'ApplicationCommandOptionType',
    'ChannelType',
    # factory.py
    'Factory',
    'factory',
    # option.py
    'Option',
)
