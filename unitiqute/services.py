# pylint: disable=invalid-name

"""Classes representing the device's UPnP services.

>>> from unitiqute.soap import DeviceEndpoint, SoapTransport
>>> transport = SoapTransport(DeviceEndpoint("192.168.1.102", 8080, 5.0))
>>> AVTransport(transport).get_transport_info()
{'current_transport_state': 'PLAYING'}
>>> RenderingControl(transport).set_volume(30)
"""

# UPnP Spec at http://upnp.org/specs/arch/UPnP-arch-DeviceArchitecture-v1.0.pdf


import logging

from .data_structures import TransportState
from .didl import mime_type_for, to_didl_string
from .exceptions import (
    UnitiQuteException,
    UnknownXMLStructure,
    describe_fault_code,
    extract_fault_code,
)
from .soap import RawXML
from .xml import XML, fromstring, ns_tag

log = logging.getLogger(__name__)  # pylint: disable=C0103


class Service:
    """A class representing a UPnP service.

    This is the base class for the service classes. The service type is taken
    from the class name.
    """

    def __init__(self, transport):
        """
        Args:
            transport (SoapTransport): The transport used to reach the device.
        """

        #: `SoapTransport`: The transport to which the UPnP Actions are sent
        self.transport = transport
        #: str: The UPnP service type.
        self.service_type = self.__class__.__name__
        #: str: The UPnP service version.
        self.version = 1
        #: str: The UPnP Control URL, relative to the device's base URL.
        self.control_url = "/{}/ctrl".format(self.service_type)
        #: dict: Arguments prepended to every action.
        self.DEFAULT_ARGS = {"InstanceID": 0}

    @property
    def service_urn(self):
        """str: The full service type, eg
        ``urn:schemas-upnp-org:service:AVTransport:1``."""
        return "urn:schemas-upnp-org:service:{}:{}".format(
            self.service_type, self.version
        )

    @staticmethod
    def unwrap_arguments(xml_response):
        """Extract arguments and their values from a SOAP response.

        Args:
            xml_response (str):  SOAP/xml response text (unicode,
                not utf-8).
        Returns:
             dict: a dict of ``{argument_name: value}`` items.

        Raises:
            UnknownXMLStructure: if the response is not a SOAP envelope with
                a body.
        """

        # A UPnP SOAP response looks like this:

        # <?xml version="1.0"?>
        # <s:Envelope
        #   xmlns:s="http://schemas.xmlsoap.org/soap/envelope/"
        #   s:encodingStyle="http://schemas.xmlsoap.org/soap/encoding/">
        #   <s:Body>
        #       <u:actionNameResponse
        #           xmlns:u="urn:schemas-upnp-org:service:serviceType:v">
        #           <argumentName>out arg value</argumentName>
        #               ... other out args and their values go here, if any
        #       </u:actionNameResponse>
        #   </s:Body>
        # </s:Envelope>

        try:
            tree = fromstring(xml_response)
        except XML.ParseError as exc:
            raise UnknownXMLStructure("Response is not XML: {}".format(exc)) from exc

        body = tree.find(ns_tag("s", "Body"))
        if body is None or len(body) == 0:
            raise UnknownXMLStructure("Response has no SOAP body")
        # Turn the children of <actionNameResponse> into a {tagname, content}
        # dict. XML unescaping is carried out for us by elementree.
        return {i.tag.rsplit("}", 1)[-1]: i.text or "" for i in body[0]}

    def send_command(self, action, args=None):
        """Send a command to the device.

        Args:
            action (str): the name of the action to be sent.
            args (list, optional): Relevant arguments as a list of (name,
                value) tuples. ``DEFAULT_ARGS`` are sent first.

        Returns:
             str: the response body.

        Raises:
            ConfigurationError: if no device address has been configured.
            NetworkFault: if the device could not be reached.
            HttpFault: if the device rejected the action. Use
                `extract_fault_code` to get the UPnP error code.
        """
        composed = list(self.DEFAULT_ARGS.items()) + list(args or [])
        log.debug("Sending %s %s", action, composed)
        return self.transport.send(
            self.control_url, self.service_urn, action, composed
        )

    def query(self, action, args=None):
        """Send a command and return its output arguments.

        A query never fails: if the device cannot be reached, rejects the
        action or answers with something unreadable, an empty dict is
        returned.

        Returns:
             dict: a dict of ``{argument_name: value}`` items.
        """
        try:
            return self.unwrap_arguments(self.send_command(action, args))
        except UnitiQuteException as exc:
            code = extract_fault_code(exc)
            if code is not None:
                log.debug(
                    "%s failed with UPnP error %s %s",
                    action,
                    code,
                    describe_fault_code(code),
                )
            else:
                log.debug("%s failed: %s", action, exc)
            return {}


class AVTransport(Service):
    """UPnP standard AV Transport service, for functions relating to transport
    management, eg play, pause and the current stream."""

    def __init__(self, transport, default_title=None):
        """
        Args:
            transport (SoapTransport): The transport used to reach the device.
            default_title (str, optional): The title sent with a stream that
                has none of its own, usually the device name.
        """
        super().__init__(transport)
        self.default_title = default_title

    def play(self):
        """Play the current transport URI."""
        self.send_command("Play", [("Speed", 1)])

    def pause(self):
        """Pause playback."""
        self.send_command("Pause")

    def stop(self):
        """Stop playback."""
        self.send_command("Stop")

    def next(self):
        """Go to the next track."""
        self.send_command("Next")

    def previous(self):
        """Go back to the previous track."""
        self.send_command("Previous")

    def play_pause(self):
        """Toggle between playing and paused.

        The device is asked what it is doing first, since it may have been
        started or stopped by another control point. Nothing is sent if no
        URI is loaded. Failures are logged, not raised.
        """
        media = self.get_media_info()
        if not media.get("current_uri"):
            log.debug("No current URI, nothing to play or pause")
            return

        state = self.get_transport_info().get("current_transport_state")
        try:
            if state in TransportState.ACTIVE:
                self.pause()
            else:
                self.play()
        except UnitiQuteException as exc:
            log.warning("Play/pause from state %s failed: %s", state, exc)

    def set_source(self, uri, title=None, mime=None):
        """Make ``uri`` the current transport URI.

        DIDL-Lite metadata is sent along with the URI, since strict renderers
        refuse a URI they know nothing about.

        Args:
            uri (str): The stream URI.
            title (str, optional): The title to show on the device. Falls
                back to `default_title`, then to "Stream".
            mime (str, optional): The MIME type. Inferred from the URI if not
                given.
        """
        title = title or self.default_title
        mime = mime_type_for(uri, mime)
        metadata = to_didl_string(uri, title, mime)
        log.debug("SetAVTransportURI %s (%s, %s)", uri, mime, title)
        self.send_command(
            "SetAVTransportURI",
            [("CurrentURI", uri), ("CurrentURIMetaData", RawXML(metadata))],
        )

    def get_transport_info(self):
        """Get the current playback state.

        Returns:
            dict: ``{"current_transport_state": state}``, where state is one
            of the `TransportState` values, or an empty dict if the device
            could not tell us.
        """
        response = self.query("GetTransportInfo")
        if "CurrentTransportState" not in response:
            return {}
        return {
            "current_transport_state": TransportState.normalize(
                response["CurrentTransportState"]
            )
        }

    def get_media_info(self):
        """Get the URI the device has loaded.

        Returns:
            dict: ``current_uri`` and ``current_uri_metadata``, either of which
            may be an empty string, or an empty dict if the device could not
            tell us.
        """
        response = self.query("GetMediaInfo")
        if not response:
            return {}
        return {
            "current_uri": response.get("CurrentURI", ""),
            "current_uri_metadata": response.get("CurrentURIMetaData", ""),
        }

    def set_default_source(self, sources, default_uri=None):
        """Load the default stream, if there is one.

        ``default_uri`` is used if given, otherwise the first of ``sources``.
        Failures are logged, not raised.

        Args:
            sources (list): `SourceDescriptor` instances.
            default_uri (str, optional): A stream URI.
        """
        if default_uri:
            uri, title, mime = default_uri, "Default", None
        elif sources and sources[0].uri:
            uri, title, mime = sources[0].uri, sources[0].name, sources[0].mime
        else:
            log.debug("No default URI or sources configured")
            return

        log.debug("Setting default transport URI: %s", uri)
        try:
            self.set_source(uri, title=title, mime=mime)
        except UnitiQuteException as exc:
            log.warning("Failed to set default URI %s: %s", uri, exc)


class RenderingControl(Service):
    """UPnP standard rendering control service, for volume and mute."""

    def set_volume(self, volume):
        """Set the master volume.

        The value is sent as it is; the device clamps or rejects it.
        """
        self.send_command(
            "SetVolume", [("Channel", "Master"), ("DesiredVolume", volume)]
        )

    def set_mute(self, mute):
        """Mute (or unmute) the master channel."""
        mute_value = "1" if mute else "0"
        self.send_command("SetMute", [("Channel", "Master"), ("DesiredMute", mute_value)])
