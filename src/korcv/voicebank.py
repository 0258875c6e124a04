"""Voicebank availability oracles built from plain label lists."""

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def never_available(label: str) -> bool:
    """Oracle for when no voicebank is loaded."""
    return False


def load_labels(path: Path) -> set[str]:
    """Read one label per line. Blank lines and '#' comments are ignored."""
    labels = set()
    with open(path, encoding="utf-8") as f:
        for line in f:
            label = line.strip()
            if not label or label.startswith("#"):
                continue
            labels.add(label)
    logger.debug(f"Read {len(labels)} labels from {path}")
    return labels


class LabelSetOracle:
    """Answers availability queries from a fixed set of sampled labels."""

    def __init__(self, labels):
        self.labels = frozenset(labels)

    @classmethod
    def from_file(cls, path: Path) -> "LabelSetOracle":
        oracle = cls(load_labels(path))
        logger.info(f"Voicebank {path}: {len(oracle)} labels")
        return oracle

    def __call__(self, label: str) -> bool:
        return label in self.labels

    def __len__(self) -> int:
        return len(self.labels)
