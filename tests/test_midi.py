"""Tests for MIDI note reading."""
from pathlib import Path

import pretty_midi

from korcv.midi import read_notes, repair_lyric


def _make_test_midi(path: Path, notes, lyrics=(), tempo=120, drums=()):
    """Write a MIDI file with the given notes and lyric events."""
    mid = pretty_midi.PrettyMIDI(initial_tempo=tempo)
    inst = pretty_midi.Instrument(program=0)
    for pitch, start, end in notes:
        inst.notes.append(pretty_midi.Note(velocity=100, pitch=pitch, start=start, end=end))
    mid.instruments.append(inst)
    if drums:
        drum = pretty_midi.Instrument(program=0, is_drum=True)
        for pitch, start, end in drums:
            drum.notes.append(pretty_midi.Note(velocity=100, pitch=pitch, start=start, end=end))
        mid.instruments.append(drum)
    for text, time in lyrics:
        mid.lyrics.append(pretty_midi.Lyric(text=text, time=time))
    mid.write(str(path))
    return path


def test_read_notes_ticks_and_lyrics(tmp_path):
    path = _make_test_midi(
        tmp_path / "song.mid",
        [(60, 0.0, 0.5), (62, 0.5, 1.0)],
        lyrics=[("la", 0.0), ("[g a]", 0.5)],
    )
    notes = read_notes(path)
    assert len(notes) == 2
    assert notes[0].lyric == "la"
    assert notes[0].position == 0
    assert notes[0].duration == 480  # one beat at 480 PPQ
    assert notes[0].pitch == 60
    assert notes[1].lyric == "[g a]"
    assert notes[1].position == 480


def test_read_notes_custom_resolution(tmp_path):
    path = _make_test_midi(tmp_path / "song.mid", [(60, 0.0, 0.5)])
    assert read_notes(path, resolution=960)[0].duration == 960


def test_notes_without_lyric_get_empty_lyric(tmp_path):
    path = _make_test_midi(tmp_path / "song.mid", [(60, 0.0, 0.5)])
    assert read_notes(path)[0].lyric == ""


def test_drums_ignored(tmp_path):
    path = _make_test_midi(
        tmp_path / "song.mid", [(60, 0.0, 0.5)], drums=[(36, 0.0, 0.1)],
    )
    assert [n.pitch for n in read_notes(path)] == [60]


def test_utf8_lyrics_are_repaired(tmp_path):
    # UTF-8 bytes of 가 stored in the file, read back through latin-1
    stored = "가".encode("utf-8").decode("latin-1")
    path = _make_test_midi(tmp_path / "song.mid", [(60, 0.0, 0.5)], lyrics=[(stored, 0.0)])
    assert read_notes(path)[0].lyric == "가"


def test_repair_lyric_leaves_plain_text():
    assert repair_lyric("la") == "la"
    assert repair_lyric("가") == "가"
