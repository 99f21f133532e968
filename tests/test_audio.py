import constants as C
from audio import MixerSink


def test_disabled_sink_never_touches_mixer():
    sink = MixerSink(enabled=False)
    assert not sink.enabled
    sink(C.SFX_WING)
    assert sink._sounds == {}


def test_missing_asset_is_silent(tmp_path, monkeypatch):
    monkeypatch.setattr(MixerSink, "_init_mixer", lambda self: True)
    sink = MixerSink(asset_dir=str(tmp_path))
    assert sink.load("audio/nope.ogg") is None
    sink("audio/nope.ogg")   # warns once, no exception
    assert sink._sounds == {"audio/nope.ogg": None}
