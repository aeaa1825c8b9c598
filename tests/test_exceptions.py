"""Tests for the exceptions module."""

import pytest

from unitiqute.exceptions import (
    HttpFault,
    NetworkFault,
    UnitiQuteException,
    describe_fault_code,
    extract_fault_code,
)


@pytest.mark.parametrize("code", [0, 401, 701, 714, 12345])
def test_extract_fault_code(helpers, code):
    assert extract_fault_code(HttpFault(500, helpers.soap_fault(code))) == code


@pytest.mark.parametrize(
    "text",
    [
        "<errorCode>714</errorCode>",
        "<ERRORCODE>714</ERRORCODE>",
        "<errorcode>714</errorcode>",
        '<errorCode xmlns="">714</errorCode>',
        "prefix <errorCode> 714 </errorCode> suffix",
    ],
)
def test_extract_fault_code_tag_variants(text):
    assert extract_fault_code(text) == 714


@pytest.mark.parametrize(
    "text",
    ["", "Internal Server Error", "<errorDescription>714</errorDescription>"],
)
def test_extract_fault_code_without_code(text):
    assert extract_fault_code(HttpFault(500, text)) is None


def test_extract_fault_code_from_other_failures():
    assert extract_fault_code(NetworkFault("timed out")) is None
    assert extract_fault_code(None) is None
    assert extract_fault_code(ValueError("<errorCode>402</errorCode>")) == 402


def test_http_fault():
    fault = HttpFault(500, "body")
    assert isinstance(fault, UnitiQuteException)
    assert fault.status_code == 500
    assert fault.body == "body"
    assert str(fault) == "HTTP 500: body"
    assert HttpFault(404, None).body == ""


def test_describe_fault_code():
    assert describe_fault_code(714) == "Illegal MIME-Type"
    assert describe_fault_code(701) == "Transition not available"
    assert describe_fault_code(999) == ""
