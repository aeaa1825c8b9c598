"""unitiqute controls a Naim UnitiQute 2 (or a compatible UPnP renderer) as a
television style device for home automation hosts."""


import logging

from .core import UnitiQute
from .data_structures import RemoteKey, SourceDescriptor, TransportState
from .exceptions import (
    ConfigurationError,
    HttpFault,
    NetworkFault,
    UnitiQuteException,
    extract_fault_code,
)

# Please increment the version number and add the suffix "-dev" after
# a release, to make it possible to identify in-development code
__version__ = "0.2.0"
__license__ = "MIT License"

# You really should not `import *` - it is poor practice
# but if you do, here is what you get:
__all__ = [
    "UnitiQute",
    "RemoteKey",
    "SourceDescriptor",
    "TransportState",
    "UnitiQuteException",
    "ConfigurationError",
    "HttpFault",
    "NetworkFault",
    "extract_fault_code",
]

# http://docs.python.org/2/howto/logging.html#library-config
# Avoids spurious error messages if no logger is configured by the user

logging.getLogger(__name__).addHandler(logging.NullHandler())
