"""Tests for the views module."""

from unittest import mock

import pytest

from unitiqute import UnitiQute
from unitiqute.views import (
    InputSource,
    MuteToggle,
    PowerSwitch,
    VolumeFader,
    input_sources,
)


@pytest.fixture()
def moco():
    """A device with fake services."""
    with mock.patch("unitiqute.core.AVTransport"), mock.patch(
        "unitiqute.core.RenderingControl"
    ):
        yield UnitiQute(
            "10.0.0.5",
            sources=[
                {"name": "Radio", "uri": "http://stream/x.mp3"},
                {"name": "Empty"},
            ],
        )


def test_power_switch(moco):
    power = PowerSwitch(moco)
    moco.avTransport.get_transport_info.return_value = {
        "current_transport_state": "PLAYING"
    }
    assert power.get() is True
    power.set(0)
    moco.avTransport.pause.assert_called_once_with()


def test_views_agree_after_mute(moco):
    """Muting from one control updates every other control."""
    updates = []
    fader = VolumeFader(moco, on_update=updates.append)
    toggle = MuteToggle(moco, on_update=updates.append)

    toggle.set(True)
    assert updates == [fader, toggle]
    assert toggle.get() is True
    assert fader.on is False
    assert fader.get() == 25

    del updates[:]
    fader.set_on(True)
    moco.renderingControl.set_mute.assert_called_with(False)
    assert updates == [fader, toggle]
    assert toggle.get() is False
    assert fader.on is True


def test_fader_volume_up_unmutes_toggle(moco):
    fader = VolumeFader(moco)
    toggle = MuteToggle(moco)
    toggle.set(True)
    fader.set(40)
    assert fader.get() == 40
    assert toggle.get() is False
    assert fader.on is True


def test_fader_is_off_at_zero_volume(moco):
    fader = VolumeFader(moco)
    fader.set(0)
    assert fader.on is False
    assert moco.get_mute() is False


def test_close_stops_updates(moco):
    on_update = mock.Mock()
    toggle = MuteToggle(moco, on_update=on_update)
    toggle.close()
    moco.set_mute(True)
    assert not on_update.called


def test_input_sources(moco):
    inputs = input_sources(moco)
    assert [(i.identifier, i.name, i.configured) for i in inputs] == [
        (0, "Radio", True),
        (1, "Empty", False),
    ]
    assert repr(inputs[0]) == "<InputSource 0 'Radio'>"
    assert isinstance(inputs[1], InputSource)


@pytest.mark.parametrize(
    "view", [PowerSwitch, VolumeFader, MuteToggle, InputSource]
)
def test_view_members_are_documented(view):
    """The host shows these docstrings as control descriptions."""
    for name, member in vars(view).items():
        if name.startswith("_"):
            continue
        if isinstance(member, property):
            member = member.fget
        assert member.__doc__, "{}.{} has no docstring".format(view.__name__, name)
