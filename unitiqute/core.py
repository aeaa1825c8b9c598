"""The core module contains the UnitiQute class, the surface a home
automation host binds its controls to.
"""

import logging
from functools import wraps

from . import config
from .data_structures import ControlState, RemoteKey, TransportState, make_sources
from .exceptions import (
    HttpFault,
    UnitiQuteException,
    describe_fault_code,
    extract_fault_code,
)
from .services import AVTransport, RenderingControl
from .soap import DeviceEndpoint, SoapTransport

_LOG = logging.getLogger(__name__)


def reports_failure(description):
    """Decorator for user initiated actions: log a failure, then re-raise it
    so that the host can show it."""

    def decorator(function):
        @wraps(function)
        def inner_function(self, *args, **kwargs):
            """Failure logging inner function."""
            try:
                return function(self, *args, **kwargs)
            except UnitiQuteException as exc:
                _LOG.error("Failed to %s: %s", description, exc)
                raise

        return inner_function

    return decorator


# pylint: disable=too-many-instance-attributes
class UnitiQute:

    """Control a UnitiQute (or a compatible UPnP renderer) as a television
    style device: power, volume, mute, inputs and remote keys.

    Volume and mute are remembered here after each successful change, so that
    several controls showing the same value can be answered without asking
    the device. Only this class changes them, and it tells every subscriber
    (see `subscribe`) afterwards. The playback state is never remembered: it
    is asked for every time, since other control points can change it.

    ..  rubric:: Basic Methods
    ..  autosummary::

        set_active
        get_active
        set_volume
        set_mute
        select_source
        get_active_identifier
        press_key
        set_default_source

    Example:

        >>> device = UnitiQute("192.168.1.40", sources=[
        ...     {"name": "Radio", "uri": "http://stream.example/radio.mp3"}])
        >>> device.set_volume(30)
        >>> device.select_source(0)
        >>> device.set_active(True)
    """

    # pylint: disable=too-many-arguments
    def __init__(
        self,
        host,
        port=None,
        timeout_ms=None,
        sources=None,
        default_uri=None,
        name=None,
    ):
        """
        Args:
            host (str): The device's IP address or host name. If it is missing
                a warning is logged, and every network call will raise
                `ConfigurationError`.
            port (int): The UPnP control port. Defaults to
                `config.DEFAULT_PORT`.
            timeout_ms (int): The timeout for each request, in milliseconds.
                Defaults to `config.REQUEST_TIMEOUT`.
            sources (list): Inputs, as dicts with ``name``, ``uri`` and
                optionally ``mime``, or `SourceDescriptor` instances.
            default_uri (str): A stream to load by `set_default_source`.
            name (str): The display name.
        """
        if not host:
            _LOG.warning("ipAddress not set in config. Please configure the device.")
        if port is None:
            port = config.DEFAULT_PORT
        if timeout_ms is None:
            timeout = config.REQUEST_TIMEOUT
        else:
            timeout = timeout_ms / 1000.0

        #: str: The display name
        self.name = name or config.DEFAULT_NAME
        #: `DeviceEndpoint`: Where requests are sent
        self.endpoint = DeviceEndpoint(host, int(port), timeout)
        #: tuple: The configured `SourceDescriptor` instances, by index
        self.sources = make_sources(sources)
        #: str: The stream loaded by `set_default_source`, if any
        self.default_uri = default_uri or None

        transport = SoapTransport(self.endpoint)
        self.avTransport = AVTransport(transport, default_title=self.name)
        self.renderingControl = RenderingControl(transport)

        self._state = ControlState(config.DEFAULT_VOLUME, False)
        self._listeners = []

    @classmethod
    def from_config(cls, conf):
        """Create an instance from a host configuration mapping.

        The keys are ``ipAddress``, ``port``, ``timeoutMs``, ``sources``
        (a list of ``{"name", "uri", "mime"}`` dicts), ``defaultUri`` and
        ``name``. Only ``ipAddress`` is needed.
        """
        return cls(
            conf.get("ipAddress"),
            port=conf.get("port"),
            timeout_ms=conf.get("timeoutMs"),
            sources=conf.get("sources"),
            default_uri=conf.get("defaultUri"),
            name=conf.get("name"),
        )

    def __repr__(self):
        return "<{} object at host {}>".format(
            self.__class__.__name__, self.endpoint.host
        )

    @property
    def device_info(self):
        """dict: Static information describing the device to the host."""
        return {
            "name": self.name,
            "manufacturer": config.MANUFACTURER,
            "model": config.MODEL,
            "serial_number": "Unknown",
        }

    @property
    def state(self):
        """`ControlState`: The remembered volume and mute values."""
        return self._state

    def subscribe(self, callback):
        """Call ``callback(state)`` after every change of volume or mute.

        ``state`` is a `ControlState`.
        """
        if callback not in self._listeners:
            self._listeners.append(callback)

    def unsubscribe(self, callback):
        """Stop calling ``callback``."""
        if callback in self._listeners:
            self._listeners.remove(callback)

    def _broadcast(self):
        state = self._state
        for callback in list(self._listeners):
            callback(state)

    @reports_failure("set active")
    def set_active(self, active):
        """Resume (``True``) or pause (``False``) playback.

        Whatever the device had loaded is resumed. If it refuses with a UPnP
        error, eg because it has no current transport, the request is
        ignored.

        Raises:
            UnitiQuteException: for anything other than a UPnP error.
        """
        if active:
            action, send = "Play", self.avTransport.play
        else:
            action, send = "Pause", self.avTransport.pause
        try:
            send()
        except HttpFault as exc:
            code = extract_fault_code(exc)
            if code is None:
                raise
            _LOG.debug(
                "%s ignored due to UPnP error %s %s", action, code, describe_fault_code(code)
            )

    def get_active(self):
        """Return `True` if the device is playing.

        Anything else, including a device which cannot be reached, counts as
        inactive.
        """
        info = self.avTransport.get_transport_info()
        return info.get("current_transport_state") in TransportState.ACTIVE

    @reports_failure("set volume")
    def set_volume(self, volume):
        """Set the volume, coerced into the range 0 to 100.

        Turning the volume up from a muted state also unmutes.
        """
        volume = int(volume)
        volume = max(0, min(volume, 100))  # Coerce in range
        self.renderingControl.set_volume(volume)
        self._state = self._state._replace(volume=volume)
        try:
            if volume > 0 and self._state.muted:
                self.renderingControl.set_mute(False)
                self._state = self._state._replace(muted=False)
        finally:
            self._broadcast()

    def get_volume(self):
        """Return the last volume the device accepted."""
        return self._state.volume

    @reports_failure("set mute")
    def set_mute(self, mute):
        """Mute (or unmute) the device."""
        mute = bool(mute)
        self.renderingControl.set_mute(mute)
        self._state = self._state._replace(muted=mute)
        self._broadcast()

    def get_mute(self):
        """Return the last mute value the device accepted."""
        return self._state.muted

    def get_source(self, identifier):
        """Return the `SourceDescriptor` with this identifier, or `None`."""
        for source in self.sources:
            if source.index == identifier:
                return source
        return None

    @reports_failure("switch source")
    def select_source(self, identifier):
        """Switch to the configured input ``identifier``.

        Unknown identifiers are ignored.
        """
        source = self.get_source(identifier)
        if source is None:
            _LOG.debug("No source with identifier %s", identifier)
            return
        self.avTransport.set_source(source.uri, title=source.name, mime=source.mime)

    def get_active_identifier(self):
        """Return the identifier of the input the device is playing.

        The device's current URI is compared with the configured inputs. If
        none matches, or the device cannot tell, 0 is returned.
        """
        uri = self.avTransport.get_media_info().get("current_uri")
        if uri:
            for source in self.sources:
                if source.uri == uri:
                    return source.index
        return 0

    def press_key(self, key):
        """Handle a remote control key, see `RemoteKey`.

        Play/pause toggles playback, left and rewind go to the previous track,
        right and fast forward to the next. Other keys are ignored. Failures
        are logged, not raised.
        """
        try:
            if key == RemoteKey.PLAY_PAUSE:
                self.avTransport.play_pause()
            elif key in (RemoteKey.ARROW_RIGHT, RemoteKey.FAST_FORWARD):
                self.avTransport.next()
            elif key in (RemoteKey.ARROW_LEFT, RemoteKey.REWIND):
                self.avTransport.previous()
            else:
                _LOG.debug("Unhandled remote key: %s", key)
        except UnitiQuteException as exc:
            _LOG.error("Failed handling remote key %s: %s", key, exc)

    def set_default_source(self):
        """Load the default URI, or else the first input, on the device.

        Meant to be called once at start up. Failures are logged, not raised.
        """
        self.avTransport.set_default_source(self.sources, self.default_uri)
