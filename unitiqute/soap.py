# -*- coding: utf-8 -*-

"""Classes for handling the device's SOAP requirements.

This module does not handle anything like the full `SOAP Specification
<http://www.w3.org/TR/soap/>`_ , but is enough for UPnP control. A UPnP
control request is an RPC style SOAP 1.1 message, POSTed to the control URL
of a service.
"""

# A complete request should look something like this:

# POST path of control URL HTTP/1.1
# HOST: host of control URL:port of control URL
# CONTENT-LENGTH: bytes in body
# CONTENT-TYPE: text/xml; charset="utf-8"
# SOAPACTION: "urn:schemas-upnp-org:service:serviceType:v#actionName"
#
# <?xml version="1.0" encoding="utf-8"?>
# <s:Envelope
#   xmlns:s="http://schemas.xmlsoap.org/soap/envelope/"
#   s:encodingStyle="http://schemas.xmlsoap.org/soap/encoding/">
#   <s:Body>
#       <u:actionName
#           xmlns:u="urn:schemas-upnp-org:service:serviceType:v">
#           <argumentName>in arg value</argumentName>
#           ... other in args and their values go here, if any
#       </u:actionName>
#   </s:Body>
# </s:Envelope>

import logging
from collections import namedtuple
from xml.sax.saxutils import escape

import requests

from .exceptions import ConfigurationError, HttpFault, NetworkFault
from .utils import prettify

_LOG = logging.getLogger(__name__)


class DeviceEndpoint(namedtuple("DeviceEndpointBase", "host, port, timeout")):
    """Where the device is, and how long to wait for it.

    ``timeout`` is in seconds, as Requests expects.
    """

    @property
    def base_url(self):
        """str: The URL all control paths are relative to."""
        return "http://{}:{}".format(self.host, self.port)


class RawXML(str):
    """An argument value which is already escaped XML text.

    `wrap_arguments` inserts it as it is, instead of escaping it again.
    """


def wrap_arguments(args=None):
    """Wrap a list of tuples in xml ready to pass into a SOAP request.

    Args:
        args (list):  a list of (name, value) tuples specifying the
            name of each argument and its value, eg
            ``[('InstanceID', 0), ('Speed', 1)]``. The value
            can be a string or something with a string representation. The
            values are escaped, unless they are `RawXML`.

    >>> wrap_arguments([('InstanceID', 0), ('Speed', 1)])
    '<InstanceID>0</InstanceID><Speed>1</Speed>'
    """
    if args is None:
        args = []

    tags = []
    for name, value in args:
        if not isinstance(value, RawXML):
            value = escape("%s" % value, {'"': "&quot;"})
        tags.append("<{name}>{value}</{name}>".format(name=name, value=value))
    return "".join(tags)


class SoapTransport:

    """Send UPnP actions to a device and hand back the raw response.

    Uses the `Requests <http://www.python-requests.org/en/latest/>`_ library
    for communication. Every call is a separate request on a fresh
    connection, and nothing is retried here: callers decide what a failure
    means.
    """

    # pylint: disable=bad-continuation
    envelope_template = (
        '<?xml version="1.0" encoding="utf-8"?>'
        '<s:Envelope xmlns:s="http://schemas.xmlsoap.org/soap/envelope/"'
        ' s:encodingStyle="http://schemas.xmlsoap.org/soap/encoding/">'
            "<s:Body>"
                '<u:{action} xmlns:u="{service_type}">'
                    "{arguments}"
                "</u:{action}>"
            "</s:Body>"
        "</s:Envelope>"
    )  # noqa PEP8

    def __init__(self, endpoint):
        """
        Args:
            endpoint (DeviceEndpoint): The device to talk to.
        """
        self.endpoint = endpoint

    @staticmethod
    def prepare_headers(service_type, action):
        """Prepare the http headers for sending.

        The SOAPAction value is quoted, as the UPnP Device Architecture
        requires. Some renderers reject it otherwise. It is sent under
        both the mixed case and the upper case name, since some renderers
        only look for one of them.

        Returns:
            dict: the headers.
        """
        soap_action = '"{}#{}"'.format(service_type, action)
        return {
            "Content-Type": 'text/xml; charset="utf-8"',
            "SOAPAction": soap_action,
            "SOAPACTION": soap_action,
            "Connection": "close",
        }

    def prepare_envelope(self, service_type, action, arguments=None):
        """Prepare the SOAP Envelope for sending.

        Args:
            service_type (str): The full service URN, eg
                ``urn:schemas-upnp-org:service:AVTransport:1``.
            action (str): The name of the action.
            arguments (list or str): ``(name, value)`` tuples, see
                `wrap_arguments`, or a string of already wrapped arguments.

        Returns:
            str: A prepared SOAP Envelope.
        """
        if not isinstance(arguments, str):
            arguments = wrap_arguments(arguments)
        return self.envelope_template.format(
            action=action, service_type=service_type, arguments=arguments
        )

    def send(self, path, service_type, action, arguments=None):
        """Send an action to the device.

        Args:
            path (str): The control path, eg ``/AVTransport/ctrl``.
            service_type (str): The full service URN.
            action (str): The name of the action.
            arguments (list or str): The action's arguments, see
                `prepare_envelope`.

        Returns:
            str: The body of the response.

        Raises:
            ConfigurationError: if no device address has been configured.
            NetworkFault: if the device could not be reached in time.
            HttpFault: if the device answered with a non 2xx status. The
                body will usually be a SOAP Fault.
        """
        if not self.endpoint.host:
            raise ConfigurationError("No device address is configured.")

        url = self.endpoint.base_url + path
        headers = self.prepare_headers(service_type, action)
        body = self.prepare_envelope(service_type, action, arguments)

        _LOG.debug("SOAP %s -> %s", action, url)
        # Check log level before logging XML, since prettifying it is
        # expensive
        if _LOG.isEnabledFor(logging.DEBUG):
            _LOG.debug("Sending %s, %s", headers, prettify(body))

        try:
            with requests.Session() as session:
                prepared = session.prepare_request(
                    requests.Request(
                        "POST", url, headers=headers, data=body.encode("utf-8")
                    )
                )
                # requests folds headers case-insensitively, so both
                # SOAPAction spellings are restored on a plain dict
                prepared.headers = dict(prepared.headers)
                prepared.headers.update(headers)
                response = session.send(prepared, timeout=self.endpoint.timeout)
        except requests.exceptions.RequestException as exc:
            raise NetworkFault("{} to {} failed: {}".format(action, url, exc)) from exc

        status = response.status_code
        _LOG.debug("Received %s from %s, %s", status, url, response.text)
        if not 200 <= status < 300:
            raise HttpFault(status, response.text)
        return response.text
