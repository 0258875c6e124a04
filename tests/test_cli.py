"""Tests for the korcv CLI."""

import json

import pretty_midi
import pytest

from korcv.cli import build_config, main, parse_args
from korcv.config import NonHangulPolicy
from korcv.timing import CodaTiming


class TestParseArgs:
    def test_lyric_defaults(self):
        args = parse_args(["lyric", "간"])
        assert args.command == "lyric"
        assert args.text == "간"
        assert args.duration == 480
        assert args.labels is None
        assert args.json is False

    def test_midi_args(self):
        args = parse_args(["midi", "song.mid", "--resolution", "960", "--json"])
        assert args.command == "midi"
        assert args.resolution == 960
        assert args.json is True

    def test_negative_consonant_duration_rejected(self):
        with pytest.raises(SystemExit):
            parse_args(["lyric", "간", "--consonant-duration", "-50"])

    def test_negative_duration_rejected(self):
        with pytest.raises(SystemExit):
            parse_args(["lyric", "간", "--duration", "-1"])

    def test_no_command_exits(self):
        with pytest.raises(SystemExit):
            parse_args([])

    def test_flags_override_config(self, monkeypatch):
        monkeypatch.delenv("KORCV_NON_HANGUL", raising=False)
        args = parse_args([
            "lyric", "가", "--non-hangul", "skip",
            "--coda-timing", "note-end", "--consonant-duration", "40",
        ])
        config = build_config(args)
        assert config.non_hangul is NonHangulPolicy.SKIP
        assert config.coda_timing is CodaTiming.NOTE_END
        assert config.consonant_duration == 40


class TestRunLyric:
    def test_json_output(self, capsys):
        main(["lyric", "간", "--json"])
        out = json.loads(capsys.readouterr().out)
        assert out == [
            {"label": "- g", "offset": 0},
            {"label": "a", "offset": 60},
            {"label": "N", "offset": 120},
        ]

    def test_labels_file(self, tmp_path, capsys):
        labels = tmp_path / "labels.txt"
        labels.write_text("a N\n", encoding="utf-8")
        main(["lyric", "간", "--labels", str(labels), "--json"])
        out = json.loads(capsys.readouterr().out)
        assert out[-1]["label"] == "a N"

    def test_text_output(self, capsys):
        main(["lyric", "[g a]"])
        lines = capsys.readouterr().out.splitlines()
        assert lines[0].split() == ["0", "g"]
        assert lines[1].split() == ["120", "a"]

    def test_missing_labels_file(self, tmp_path):
        with pytest.raises(SystemExit):
            main(["lyric", "간", "--labels", str(tmp_path / "missing.txt")])

    def test_bad_env_config(self, monkeypatch, capsys):
        monkeypatch.setenv("KORCV_CODA_TIMING", "late")
        with pytest.raises(SystemExit):
            main(["lyric", "간"])
        assert "KORCV_CODA_TIMING" in capsys.readouterr().err


class TestRunMidi:
    def test_json_output(self, tmp_path, capsys):
        mid = pretty_midi.PrettyMIDI(initial_tempo=120)
        inst = pretty_midi.Instrument(program=0)
        inst.notes.append(pretty_midi.Note(velocity=100, pitch=60, start=0.0, end=0.5))
        inst.notes.append(pretty_midi.Note(velocity=100, pitch=62, start=0.5, end=1.0))
        mid.instruments.append(inst)
        mid.lyrics.append(pretty_midi.Lyric(text="[g a]", time=0.0))
        mid.lyrics.append(pretty_midi.Lyric(text="+", time=0.5))
        path = tmp_path / "song.mid"
        mid.write(str(path))

        main(["midi", str(path), "--json"])
        out = json.loads(capsys.readouterr().out)
        assert len(out) == 2
        assert [p["label"] for p in out[0]["phonemes"]] == ["g", "a"]
        assert out[1]["phonemes"] == []
        assert out[1]["position"] == 480

    def test_missing_file(self, tmp_path):
        with pytest.raises(SystemExit):
            main(["midi", str(tmp_path / "missing.mid")])
