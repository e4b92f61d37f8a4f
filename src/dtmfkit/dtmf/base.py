"""Frame-based DTMF detector interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from dtmfkit.audio_frame import AudioFrame


@dataclass(frozen=True)
class DTMFEvent:
    """A DTMF digit recognized in a frame stream."""

    digit: str
    """The DTMF digit ('0'-'9', '*', '#', 'A'-'D')."""

    duration_samples: int
    """Samples the digit had been held for when it was recognized."""

    sample_rate: int
    """Sample rate of the stream the digit was found in."""

    timestamp_ms: float | None = None
    """Timestamp of the frame that completed recognition, if the frame had one."""

    @property
    def duration_ms(self) -> float:
        return self.duration_samples * 1000.0 / self.sample_rate


class DTMFDetector(ABC):
    """Turns a stream of AudioFrames into DTMF digit events."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Detector name (e.g. 'goertzel')."""
        ...

    @abstractmethod
    def process(self, frame: AudioFrame) -> DTMFEvent | None:
        """Feed one frame; return the oldest digit event not yet returned."""
        ...

    def reset(self) -> None:  # noqa: B027
        """Forget in-progress detection state."""

    def close(self) -> None:  # noqa: B027
        """Release resources."""
