"""Thin views over a `UnitiQute` device, one per control the host shows.

A host typically shows the same volume and mute values in more than one
place: a speaker control, a dimmer style fader whose on/off switch is the
inverse of mute, and a separate mute switch. Each view reads through the
device and forwards changes to it. The device calls `update` on every view
after volume or mute changes, whichever view caused it, and the view passes
itself on to the host's ``on_update`` callback::

    fader = VolumeFader(device, on_update=lambda view: show(view.get(), view.on))
"""

import logging

_LOG = logging.getLogger(__name__)


class View:
    """Base class for views that follow the device's volume and mute."""

    def __init__(self, device, on_update=None):
        """
        Args:
            device (UnitiQute): The device.
            on_update (callable): Called with the view after each change.
        """
        self.device = device
        self.on_update = on_update
        device.subscribe(self.update)

    def update(self, state):
        """Called by the device with the new `ControlState`."""
        _LOG.debug("%s updated: %s", self.__class__.__name__, state)
        if self.on_update is not None:
            self.on_update(self)

    def close(self):
        """Stop following the device."""
        self.device.unsubscribe(self.update)


class PowerSwitch:
    """The device's on/off switch: on means playing."""

    def __init__(self, device):
        self.device = device

    def get(self):
        """Return True if the device is playing."""
        return self.device.get_active()

    def set(self, value):
        """Play if `value` is truthy, otherwise pause."""
        self.device.set_active(bool(value))


class VolumeFader(View):
    """Volume as a level, plus an on/off switch which is the inverse of
    mute."""

    def get(self):
        """Return the cached volume, 0 to 100."""
        return self.device.get_volume()

    def set(self, value):
        """Set the volume, unmuting if it goes above 0."""
        self.device.set_volume(value)

    @property
    def on(self):
        """bool: True if the volume is up and the device is not muted."""
        return self.device.state.sound_on

    def set_on(self, value):
        """Switch the sound on (unmute) or off (mute)."""
        self.device.set_mute(not value)


class MuteToggle(View):
    """A switch that is on while the device is muted."""

    def get(self):
        """Return True if the device is muted."""
        return self.device.get_mute()

    def set(self, value):
        """Mute if `value` is truthy, otherwise unmute."""
        self.device.set_mute(bool(value))


class InputSource:
    """A configured input, as the host lists it."""

    def __init__(self, source):
        """
        Args:
            source (SourceDescriptor): The input.
        """
        self.source = source

    @property
    def identifier(self):
        """int: The input's index in the configured sources."""
        return self.source.index

    @property
    def name(self):
        """str: The input's display name."""
        return self.source.name

    @property
    def configured(self):
        """bool: True if the input has a stream URI."""
        return bool(self.source.uri)

    def __repr__(self):
        return "<InputSource {} {!r}>".format(self.identifier, self.name)


def input_sources(device):
    """Return an `InputSource` for each of the device's configured inputs."""
    return [InputSource(source) for source in device.sources]
