"""Minimal DIDL-Lite metadata for stream URIs.

Strict renderers refuse a bare ``SetAVTransportURI`` (UPnP error 714,
"Illegal MIME-Type") unless the ``CurrentURIMetaData`` argument describes the
item, and in particular its MIME type. The functions here build the smallest
description that satisfies them.
"""

import posixpath
from urllib.parse import urlparse
from xml.sax.saxutils import escape

from .xml import XML, NAMESPACES

#: Stream MIME type by file extension.
MIME_TYPES = {
    ".mp3": "audio/mpeg",
    ".aac": "audio/aac",
    ".m4a": "audio/aac",
    ".aacp": "audio/aacp",
    ".flac": "audio/flac",
    ".wav": "audio/wav",
    ".ogg": "audio/ogg",
    ".oga": "audio/ogg",
    ".m3u": "audio/mpegurl",
    ".m3u8": "audio/mpegurl",
    ".pls": "audio/x-scpls",
}

#: Used when the extension is unknown. Most internet radio streams have none.
DEFAULT_MIME_TYPE = "audio/mpeg"

DEFAULT_TITLE = "Stream"

AUDIO_ITEM_CLASS = "object.item.audioItem"


def mime_type_for(uri, explicit_mime=None):
    """Return the MIME type to announce for a URI.

    Args:
        uri (str): The stream URI.
        explicit_mime (str, optional): Used verbatim if given.

    Returns:
        str: The MIME type.

    >>> mime_type_for("http://example.com/radio.FLAC?x=1")
    'audio/flac'
    """
    if explicit_mime:
        return explicit_mime
    try:
        path = urlparse(uri).path
    except (AttributeError, ValueError):
        return DEFAULT_MIME_TYPE
    extension = posixpath.splitext(path.lower())[1]
    return MIME_TYPES.get(extension, DEFAULT_MIME_TYPE)


def protocol_info(mime):
    """Return the ``res@protocolInfo`` value for an HTTP stream."""
    return "http-get:*:{}:*".format(mime)


def to_didl_string(uri, title, mime):
    """Describe a single audio item, escaped for use as an argument value.

    The DIDL-Lite document itself escapes the title and the URI. The whole
    document is then escaped again, since the renderer reads the
    ``CurrentURIMetaData`` argument as text which holds XML. Wrap the result
    in `~unitiqute.soap.RawXML` so that it is not escaped a third time.

    Args:
        uri (str): The stream URI.
        title (str): The title to show on the device.
        mime (str): The MIME type, see `mime_type_for`.

    Returns:
        str: The escaped DIDL-Lite document.
    """
    didl = XML.Element(
        "DIDL-Lite",
        {
            "xmlns": NAMESPACES[""],
            "xmlns:dc": NAMESPACES["dc"],
            "xmlns:upnp": NAMESPACES["upnp"],
        },
    )
    item = XML.SubElement(
        didl, "item", {"id": "0", "parentID": "-1", "restricted": "1"}
    )
    XML.SubElement(item, "dc:title").text = title or DEFAULT_TITLE
    XML.SubElement(item, "upnp:class").text = AUDIO_ITEM_CLASS
    XML.SubElement(item, "res", {"protocolInfo": protocol_info(mime)}).text = uri
    document = XML.tostring(didl, encoding="unicode")
    return escape(document, {'"': "&quot;"})
