"""This module contains configuration variables.

They may be set by your code as follows::

    from unitiqute import config
    ...
    config.VARIABLE = value

Values are read when a `UnitiQute` instance is created, so they must be set
before that.
"""

REQUEST_TIMEOUT = 5.0
"""The timeout (in seconds) used when sending commands to the device.

Used when no timeout is passed to `UnitiQute`. Every SOAP call carries a
timeout; a call which exceeds it fails with a
:class:`~unitiqute.exceptions.NetworkFault`.
"""

DEFAULT_PORT = 8080
"""The port of the device's UPnP control server."""

DEFAULT_VOLUME = 25
"""The volume assumed before the first successful volume change."""

DEFAULT_NAME = "Naim UnitiQute 2"
"""The display name used when the host configuration does not give one."""

MANUFACTURER = "Naim Audio"
"""Reported in `UnitiQute.device_info`."""

MODEL = "UnitiQute 2"
"""Reported in `UnitiQute.device_info`."""
