import pytest

from curtainsdrawn.audio import AudioError, AudioPlayer


class FakeSound:
    def __init__(self, path):
        self.path = path
        self.loops = None
        self.stopped = False

    def play(self, loops=0):
        self.loops = loops

    def stop(self):
        self.stopped = True


@pytest.fixture
def wav(tmp_path):
    path = tmp_path / "error.wav"
    path.write_bytes(b"RIFF")
    return path


def test_missing_file_raises(tmp_path):
    player = AudioPlayer(FakeSound)
    with pytest.raises(FileNotFoundError):
        player.play(tmp_path / "nope.wav", False)
    assert player.playing == 0


def test_silent_player_plays_nothing(wav):
    player = AudioPlayer()
    assert player.enabled is False
    assert player.play(wav, True) is None
    assert player.playing == 0


def test_looping_and_single_play(wav):
    player = AudioPlayer(FakeSound)
    looped = player.play(wav, True)
    once = player.play(wav, False)
    assert looped.loops == -1
    assert once.loops == 0
    assert looped.path == str(wav)
    assert player.playing == 2


def test_stop_all_stops_and_clears(wav):
    player = AudioPlayer(FakeSound)
    sounds = [player.play(wav, True), player.play(wav, False)]
    player.stop_all()
    assert [s.stopped for s in sounds] == [True, True]
    assert player.playing == 0


def test_loader_failure_becomes_audio_error(wav):
    def broken(path):
        raise RuntimeError("bad data")

    player = AudioPlayer(broken)
    with pytest.raises(AudioError):
        player.play(wav, False)
    assert player.playing == 0