import pytest

from statusblocks.sound import DeviceKind, clamp_step, map_output_name, volume_icon


@pytest.mark.parametrize(
    "volume, expected",
    [
        (0, "volume_muted"),
        (1, "volume_empty"),
        (20, "volume_empty"),
        (21, "volume_half"),
        (70, "volume_half"),
        (71, "volume_full"),
        (150, "volume_full"),
    ],
)
def test_sink_icons(volume, expected):
    assert volume_icon(volume, DeviceKind.SINK) == expected


def test_source_icons():
    assert volume_icon(0, DeviceKind.SOURCE) == "microphone_muted"
    assert volume_icon(50, DeviceKind.SOURCE) == "microphone_half"


@pytest.mark.parametrize("form_factor", ["headset", "headphone", "hands-free", "portable"])
def test_headphone_form_factors(form_factor):
    assert volume_icon(50, DeviceKind.SINK, True, form_factor) == "headphones"


def test_other_form_factor_ignores_port():
    assert volume_icon(50, DeviceKind.SINK, True, "speaker", "analog-output-headphones") == (
        "volume_half"
    )


def test_falls_back_to_active_port():
    assert volume_icon(90, DeviceKind.SINK, True, None, "analog-output-headphones") == "headphones"
    assert volume_icon(90, DeviceKind.SINK, True, None, "analog-output-speaker") == "volume_full"


def test_indicator_disabled():
    assert volume_icon(90, DeviceKind.SINK, False, "headset") == "volume_full"


def test_indicator_only_for_sinks():
    assert volume_icon(90, DeviceKind.SOURCE, True, "headset") == "microphone_full"


def test_clamp_step():
    assert clamp_step(100) == 50
    assert clamp_step(7) == 7
    assert clamp_step(-3) == 0


def test_map_output_name():
    mappings = {"alsa_output.pci-0000_00_1b.0.analog-stereo": "🎧"}
    assert map_output_name("alsa_output.pci-0000_00_1b.0.analog-stereo", mappings) == "🎧"
    assert map_output_name("other", mappings) == "other"
    assert map_output_name("other", None) == "other"