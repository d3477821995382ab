"""Co-driver pace notes: picking sign icons and voice samples for spoken notes."""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Callable, Generic, Hashable, Mapping, TypeVar

T = TypeVar("T")

# Expected upper bound on a note's length; longer notes still work.
NOTE_MAXLENGTH = 128


@dataclass
class CodriverUserConfig:
    """User settings for the co-driver signs."""

    life: float = 3.00
    """Seconds until the signs start fading."""
    scale: float = 0.20
    """Scale of the signs."""
    posx: float = 0.00
    """Horizontal centre of the row of signs."""
    posy: float = 0.45
    """Vertical centre of the row of signs."""


def match_notes(notes: str, vocabulary: Mapping[str, T]) -> list[T]:
    """Translate pace notes into vocabulary entries, matching greedily.

    The notes are split into words. Starting from the first remaining word,
    words are glued together without separators, and the longest run that
    names a vocabulary entry is consumed. If no run matches, the first word
    is dropped.
    """
    words = notes.split()
    found: list[T] = []
    while words:
        joined = ""
        cut = 0
        match: T | None = None
        matched = False
        for index, word in enumerate(words):
            joined += word
            if joined in vocabulary:
                match = vocabulary[joined]
                matched = True
                cut = index
        if matched:
            found.append(match)  # type: ignore[arg-type]
        del words[: cut + 1]
    return found


class CodriverSigns(Generic[T]):
    """Chooses and places the co-driver sign icons shown to the driver."""

    def __init__(self, signs: Mapping[str, T], uc: CodriverUserConfig | None = None) -> None:
        self.signs = dict(signs)
        self.uc = uc if uc is not None else CodriverUserConfig()
        self.current: list[T] = []
        self.cptime = 0.0

    def set(self, notes: str, time: float) -> None:
        """Replace the displayed signs with those for the given notes."""
        self.current = match_notes(notes, self.signs)
        self.cptime = time

    def alpha(self, coursetime: float) -> float | None:
        """Return the signs' opacity at the given course time.

        Returns None when nothing is to be shown; once the signs have fully
        faded they are dropped.
        """
        if not self.current:
            return None
        elapsed = coursetime - self.cptime
        if elapsed < self.uc.life:
            return 1.0
        if elapsed < self.uc.life + 1.0:
            return (self.uc.life + 1.0) - elapsed
        self.current.clear()
        return None

    def layout(self, coursetime: float) -> list[tuple[T, float, float, float, float]]:
        """Place the signs for drawing.

        Each entry is (sign, centre x, centre y, half size, alpha); the signs
        sit side by side in a row centred on the configured position.
        """
        alpha = self.alpha(coursetime)
        if alpha is None:
            return []
        uc = self.uc
        first = 1.0 - len(self.current)
        return [
            (sign, uc.posx + uc.scale * (first + 2.0 * index), uc.posy, uc.scale, alpha)
            for index, sign in enumerate(self.current)
        ]


class CodriverVoice(Generic[T]):
    """Speaks pace notes by playing recorded words one after another."""

    def __init__(
        self,
        words: Mapping[str, T],
        volume: float,
        player: Callable[[T, float], None],
    ) -> None:
        """`player` plays one sample at a volume and returns when it has finished."""
        self.words = dict(words)
        self.volume = volume
        self.player = player

    def say(self, notes: str) -> threading.Thread | None:
        """Start speaking the notes in the background; returns the speaking thread."""
        if not self.words:
            return None
        samples = match_notes(notes, self.words)
        thread = threading.Thread(target=self._speak, args=(samples,), daemon=True)
        thread.start()
        return thread

    def _speak(self, samples: list[T]) -> None:
        for sample in samples:
            self.player(sample, self.volume)