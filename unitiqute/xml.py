# pylint: disable=invalid-name,wrong-import-position,redefined-builtin

"""XML related utility functions."""


import sys
import re

import xml.etree.ElementTree as XML


# Create regular expression for filtering invalid characters, from:
# http://stackoverflow.com/questions/1707890/
# fast-way-to-filter-illegal-xml-unicode-chars-in-python
# Some renderers put raw control characters in track metadata.

illegal_unichrs = [
    (0x00, 0x08),
    (0x0B, 0x0C),
    (0x0E, 0x1F),
    (0x7F, 0x84),
    (0x86, 0x9F),
    (0xD800, 0xDFFF),
    (0xFDD0, 0xFDDF),
    (0xFFFE, 0xFFFF),
]

illegal_ranges = [
    "{}-{}".format(chr(low), chr(high))
    for (low, high) in illegal_unichrs
    if low < sys.maxunicode
]

illegal_xml_re = re.compile("[%s]" % "".join(illegal_ranges))


#: Namespaces used by the DIDL-Lite metadata and SOAP envelopes, and their
#: abbreviations, used by `ns_tag`.
NAMESPACES = {
    "": "urn:schemas-upnp-org:metadata-1-0/DIDL-Lite/",
    "dc": "http://purl.org/dc/elements/1.1/",
    "upnp": "urn:schemas-upnp-org:metadata-1-0/upnp/",
    "s": "http://schemas.xmlsoap.org/soap/envelope/",
}


def ns_tag(ns_id, tag):
    """Return a namespace/tag item.

    Args:
        ns_id (str): A namespace id, eg ``"dc"`` (see `NAMESPACES`)
        tag (str): An XML tag, eg ``"title"``

    Returns:
        str: A fully qualified tag.

    >>> xml.ns_tag('dc', 'title')
    '{http://purl.org/dc/elements/1.1/}title'
    """
    return "{{{}}}{}".format(NAMESPACES[ns_id], tag)


def fromstring(text):
    """Parse a unicode XML document, dropping characters XML forbids.

    Raises:
        xml.etree.ElementTree.ParseError: if the text is still not
            well-formed once filtered.
    """
    # ElementTree prefers to be fed bytes
    try:
        return XML.fromstring(text.encode("utf-8"))
    except XML.ParseError:
        filtered = illegal_xml_re.sub("", text)
        return XML.fromstring(filtered.encode("utf-8"))
