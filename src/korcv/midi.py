"""Read lyric-bearing notes from MIDI files."""
import logging
from pathlib import Path

import pretty_midi

from korcv.types import Note

logger = logging.getLogger(__name__)

RESOLUTION = 480    # ticks per quarter note


def repair_lyric(text: str) -> str:
    """Undo UTF-8 lyrics that were decoded as latin-1 by the MIDI reader."""
    try:
        return text.encode("latin-1").decode("utf-8")
    except UnicodeError:
        return text


def read_notes(path: Path, resolution: int = RESOLUTION) -> list[Note]:
    """Parse a MIDI file into notes with lyrics and tick timing.

    Drum tracks are ignored. Lyric events are matched to notes by start tick;
    notes without a lyric get an empty one.
    """
    mid = pretty_midi.PrettyMIDI(str(path))

    def ticks(seconds: float) -> int:
        return round(mid.time_to_tick(seconds) * resolution / mid.resolution)

    lyrics = {}
    for lyric in mid.lyrics:
        lyrics.setdefault(ticks(lyric.time), repair_lyric(lyric.text))

    notes = []
    for inst in mid.instruments:
        if inst.is_drum:
            continue
        for n in inst.notes:
            start = ticks(n.start)
            notes.append(Note(
                lyric=lyrics.get(start, ""),
                duration=ticks(n.end) - start,
                position=start,
                pitch=n.pitch,
            ))
    notes.sort(key=lambda n: n.position)

    unmatched = set(lyrics) - {n.position for n in notes}
    if unmatched:
        logger.warning(f"{len(unmatched)} lyric event(s) in {path} do not start a note")
    return notes
