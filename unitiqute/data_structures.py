"""Value types shared by the services, the facade and its views."""

from collections import namedtuple


class SourceDescriptor(namedtuple("SourceDescriptorBase", "name, uri, mime, index")):
    """A configured input: a named stream URI.

    ``index`` is the position in the configured list, and is the identifier
    the host sees. ``mime`` may be `None`, in which case it is inferred from
    the URI.
    """

    @classmethod
    def from_dict(cls, index, item):
        """Create a descriptor from a host configuration entry.

        Args:
            index (int): The position of the entry.
            item (dict): ``{"name": ..., "uri": ..., "mime": ...}``. Only
                ``uri`` is required.
        """
        return cls(
            name=item.get("name") or "Input {}".format(index + 1),
            uri=item.get("uri") or "",
            mime=item.get("mime"),
            index=index,
        )


def make_sources(items):
    """Return a tuple of `SourceDescriptor`, indexed by position.

    Items may be dicts (see `SourceDescriptor.from_dict`) or descriptors, whose
    index is replaced by their position.
    """
    sources = []
    for index, item in enumerate(items or ()):
        if isinstance(item, SourceDescriptor):
            sources.append(item._replace(index=index))
        else:
            sources.append(SourceDescriptor.from_dict(index, item))
    return tuple(sources)


class ControlState(namedtuple("ControlStateBase", "volume, muted")):
    """The last volume and mute values the device accepted."""

    @property
    def sound_on(self):
        """bool: True if something should be audible."""
        return self.volume > 0 and not self.muted


class TransportState:
    """Playback states reported by ``GetTransportInfo``."""

    STOPPED = "STOPPED"
    PLAYING = "PLAYING"
    PAUSED = "PAUSED"
    TRANSITIONING = "TRANSITIONING"
    NO_MEDIA_PRESENT = "NO_MEDIA_PRESENT"
    UNKNOWN = "UNKNOWN"

    #: States in which the device counts as active.
    ACTIVE = (PLAYING, TRANSITIONING)

    _ALIASES = {"PAUSED_PLAYBACK": PAUSED, "PAUSED_RECORDING": PAUSED}

    @classmethod
    def normalize(cls, value):
        """Map a ``CurrentTransportState`` value onto one of the states.

        >>> TransportState.normalize("PAUSED_PLAYBACK")
        'PAUSED'
        """
        value = (value or "").strip().upper()
        value = cls._ALIASES.get(value, value)
        if value in (
            cls.STOPPED,
            cls.PLAYING,
            cls.PAUSED,
            cls.TRANSITIONING,
            cls.NO_MEDIA_PRESENT,
        ):
            return value
        return cls.UNKNOWN


# pylint: disable=too-few-public-methods
class RemoteKey:
    """Remote control key codes, as a television style host sends them."""

    REWIND = 0
    FAST_FORWARD = 1
    NEXT_TRACK = 2
    PREVIOUS_TRACK = 3
    ARROW_UP = 4
    ARROW_DOWN = 5
    ARROW_LEFT = 6
    ARROW_RIGHT = 7
    SELECT = 8
    BACK = 9
    EXIT = 10
    PLAY_PAUSE = 11
    INFORMATION = 15
