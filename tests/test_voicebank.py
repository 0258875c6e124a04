"""Tests for voicebank label oracles."""

import logging

import pytest

from korcv.voicebank import LabelSetOracle, load_labels, never_available


def test_never_available():
    assert never_available("- a") is False


def test_load_labels_skips_blanks_and_comments(tmp_path):
    path = tmp_path / "labels.txt"
    path.write_text("# vowels\n- a\na\n\n  a N  \n", encoding="utf-8")
    assert load_labels(path) == {"- a", "a", "a N"}


def test_load_labels_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_labels(tmp_path / "nope.txt")


def test_label_set_oracle():
    oracle = LabelSetOracle(["a N", "- wa"])
    assert oracle("a N")
    assert not oracle("a")
    assert len(oracle) == 2


def test_label_set_oracle_from_file(tmp_path, caplog):
    path = tmp_path / "labels.txt"
    path.write_text("wa -\n", encoding="utf-8")
    with caplog.at_level(logging.INFO, logger="korcv.voicebank"):
        oracle = LabelSetOracle.from_file(path)
    assert oracle("wa -")
    assert "1 labels" in caplog.text
