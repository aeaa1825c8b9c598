"""py.test hooks.

Add the --ip command line option, and skip all tests marked the with
'integration' marker unless the option is included
"""

import pytest


def pytest_addoption(parser):
    """Add the --ip commandline option"""
    parser.addoption(
        "--ip",
        type=str,
        default=None,
        action="store",
        dest="IP",
        help="the IP address of the device to be used for the integration tests",
    )


def pytest_runtest_setup(item):
    """Skip tests marked 'integration' unless an ip address is given."""
    if "integration" in item.keywords and not item.config.getoption("--ip"):
        pytest.skip("use --ip and an ip address to run integration tests.")


def soap_response(action, service_type, arguments=""):
    """Return the SOAP envelope a device answers ``action`` with."""
    return "".join(
        [
            '<?xml version="1.0"?>',
            '<s:Envelope xmlns:s="http://schemas.xmlsoap.org/soap/envelope/"',
            ' s:encodingStyle="http://schemas.xmlsoap.org/soap/encoding/">',
            "<s:Body>",
            '<u:{}Response xmlns:u="urn:schemas-upnp-org:service:{}:1">'.format(
                action, service_type
            ),
            arguments,
            "</u:{}Response>".format(action),
            "</s:Body>",
            "</s:Envelope>",
        ]
    )


def soap_fault(error_code, description=""):
    """Return a SOAP Fault envelope carrying a UPnP error code."""
    return "".join(
        [
            '<?xml version="1.0"?>',
            "<s:Envelope ",
            'xmlns:s="http://schemas.xmlsoap.org/soap/envelope/" ',
            's:encodingStyle="http://schemas.xmlsoap.org/soap/encoding/">',
            "<s:Body>",
            "<s:Fault>",
            "<faultcode>s:Client</faultcode>",
            "<faultstring>UPnPError</faultstring>",
            "<detail>",
            '<UPnPError xmlns="urn:schemas-upnp-org:control-1-0">',
            "<errorCode>{}</errorCode>".format(error_code),
            "<errorDescription>{}</errorDescription>".format(description),
            "</UPnPError>",
            "</detail>",
            "</s:Fault>",
            "</s:Body>",
            "</s:Envelope>",
        ]
    )


class Helpers:
    """Test helper functions"""

    soap_response = staticmethod(soap_response)
    soap_fault = staticmethod(soap_fault)

    @staticmethod
    def soap_actions(mocker):
        """Return the SOAP actions a requests_mock Mocker saw, in order."""
        return [
            request.headers["SOAPAction"].strip('"').rsplit("#", 1)[-1]
            for request in mocker.request_history
        ]


@pytest.fixture
def helpers():
    return Helpers
