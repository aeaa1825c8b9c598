"""Exceptions that are used by unitiqute."""

import re

_ERROR_CODE_RE = re.compile(r"<errorCode(?:\s[^>]*)?>\s*(\d+)\s*</errorCode>", re.I)

# From table 3.3 in
# http://upnp.org/specs/arch/UPnP-arch-DeviceArchitecture-v1.1.pdf and the
# AVTransport:1 service definition. Codes between 700-799 are service specific.
UPNP_ERRORS = {
    400: "Bad Request",
    401: "Invalid Action",
    402: "Invalid Args",
    404: "Invalid Var",
    412: "Precondition Failed",
    501: "Action Failed",
    600: "Argument Value Invalid",
    601: "Argument Value Out of Range",
    602: "Optional Action Not Implemented",
    603: "Out Of Memory",
    604: "Human Intervention Required",
    605: "String Argument Too Long",
    606: "Action Not Authorized",
    701: "Transition not available",
    702: "No contents",
    703: "Read error",
    704: "Format not supported for playback",
    705: "Transport is locked",
    706: "Write error",
    707: "Media is protected or not writeable",
    708: "Format not supported for recording",
    709: "Media is full",
    710: "Seek mode not supported",
    711: "Illegal seek target",
    712: "Play mode not supported",
    713: "Record quality not supported",
    714: "Illegal MIME-Type",
    715: 'Content "BUSY"',
    716: "Resource Not found",
    717: "Play speed not supported",
    718: "Invalid InstanceID",
}


class UnitiQuteException(Exception):

    """Base class for all unitiqute exceptions."""


class ConfigurationError(UnitiQuteException):

    """Raised when a network call is attempted without a device address."""


class NetworkFault(UnitiQuteException):

    """The device could not be reached.

    Covers refused connections, timeouts and name resolution failures. The
    underlying requests exception is available as ``__cause__``.
    """


class HttpFault(UnitiQuteException):

    """The device answered with a status outside the 2xx range.

    The body is kept verbatim, since it is usually a SOAP Fault document
    which may carry a UPnP error code. See `extract_fault_code`.
    """

    def __init__(self, status_code, body=""):
        """
        Args:
            status_code (int): The HTTP status code.
            body (str): The raw response body.
        """
        super().__init__(status_code, body)
        self.status_code = status_code
        self.body = body or ""

    def __str__(self):
        return "HTTP {}: {}".format(self.status_code, self.body)


class UnknownXMLStructure(UnitiQuteException):

    """Raised if XML with an unknown or unexpected structure is returned."""


def extract_fault_code(fault):
    """Return the UPnP error code carried by a failure, if there is one.

    Args:
        fault (Exception or str): An `HttpFault`, any other exception, or the
            raw text of a fault response.

    Returns:
        int: The ``<errorCode>`` value, or `None` if the text has none.

    >>> extract_fault_code(HttpFault(500, "<errorCode>714</errorCode>"))
    714
    """
    if isinstance(fault, HttpFault):
        text = fault.body
    else:
        text = "" if fault is None else str(fault)
    match = _ERROR_CODE_RE.search(text)
    if match is None:
        return None
    return int(match.group(1))


def describe_fault_code(code):
    """Return the standard description of a UPnP error code, or ``""``."""
    return UPNP_ERRORS.get(code, "")
