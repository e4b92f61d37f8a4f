"""Goertzel DTMF detector for AudioFrame streams.

Wraps a :class:`~dtmfkit.dtmf.detector.DigitDetector` session behind the
frame-based :class:`~dtmfkit.dtmf.base.DTMFDetector` interface. An event is
emitted when a digit begins; its duration is what has been recognized by
the end of that frame.
"""

from __future__ import annotations

import logging
from collections import deque
from typing import TYPE_CHECKING

from dtmfkit.audio_frame import AudioEncoding
from dtmfkit.config import MAX_DIGITS, DTMFConfig
from dtmfkit.dtmf.base import DTMFDetector, DTMFEvent
from dtmfkit.dtmf.detector import DigitDetector
from dtmfkit.dtmf.sink import DigitBuffer
from dtmfkit.errors import ConfigurationError

if TYPE_CHECKING:
    from dtmfkit.audio_frame import AudioFrame

logger = logging.getLogger(__name__)


class GoertzelDTMFDetector(DTMFDetector):
    """DTMF detector using fixed-point Goertzel filters.

    The detection session is created from the first frame's sample rate;
    later frames must keep it. Frames must be mono, either 16-bit PCM or
    G.711 (PCMU/PCMA), which is expanded to 16-bit before detection.

    ``process`` returns one event per call. When a frame yields several
    digits the rest wait in a queue of at most ``max_pending`` events;
    call :meth:`drain_events` to take them all at once. Digits arriving
    while the queue is full are dropped and counted in ``lost_events``.

    Parameters:
        config: Debounce and twist parameters.
        relax: Use the relaxed twist tolerances.
        max_pending: Capacity of the pending event queue.
    """

    def __init__(
        self,
        config: DTMFConfig | None = None,
        *,
        relax: bool = False,
        max_pending: int = MAX_DIGITS,
    ) -> None:
        if max_pending < 1:
            raise ConfigurationError(f"max_pending must be at least 1, got {max_pending}")
        self._config = config or DTMFConfig()
        self._relax = relax
        self._max_pending = max_pending
        self._buffer = DigitBuffer()
        self._detector: DigitDetector | None = None
        self._pending: deque[DTMFEvent] = deque()
        self.lost_events = 0

    @property
    def name(self) -> str:
        return "goertzel"

    @property
    def detector(self) -> DigitDetector | None:
        """The underlying session, or None before the first frame."""
        return self._detector

    @property
    def current_digit(self) -> str | None:
        return self._detector.current_digit if self._detector is not None else None

    @property
    def pending(self) -> int:
        return len(self._pending)

    def _session_for(self, frame: AudioFrame) -> DigitDetector:
        if frame.channels != 1:
            raise ConfigurationError(f"DTMF detection requires mono audio, got {frame.channels}")
        if frame.encoding == AudioEncoding.PCM16 and frame.sample_width != 2:
            raise ConfigurationError(
                "DTMF detection requires 16-bit PCM or G.711, "
                f"got sample_width={frame.sample_width}"
            )
        if self._detector is None:
            self._detector = DigitDetector(
                sample_rate=frame.sample_rate,
                config=self._config,
                sink=self._buffer,
            )
        elif frame.sample_rate != self._detector.sample_rate:
            raise ConfigurationError(
                f"sample_rate changed from {self._detector.sample_rate} "
                f"to {frame.sample_rate} mid-session"
            )
        return self._detector

    def _collect(self, frame: AudioFrame, sample_rate: int) -> None:
        for record in self._buffer.drain():
            if len(self._pending) >= self._max_pending:
                self.lost_events += 1
                logger.warning(
                    "DTMF event queue full (%d), dropping digit %r (lost=%d)",
                    self._max_pending,
                    record.digit,
                    self.lost_events,
                )
                continue
            event = DTMFEvent(
                digit=record.digit,
                duration_samples=record.duration,
                sample_rate=sample_rate,
                timestamp_ms=frame.timestamp_ms,
            )
            logger.debug("DTMF digit %r detected (%.1fms)", event.digit, event.duration_ms)
            self._pending.append(event)

    def process(self, frame: AudioFrame) -> DTMFEvent | None:
        detector = self._session_for(frame)
        detector.process(frame.samples(), relax=self._relax)
        self._collect(frame, detector.sample_rate)

        if self._pending:
            event = self._pending.popleft()
            frame.metadata["dtmf"] = {
                "digit": event.digit,
                "duration_ms": event.duration_ms,
            }
            return event
        return None

    def drain_events(self) -> list[DTMFEvent]:
        """Return and clear every event not yet returned by :meth:`process`."""
        events = list(self._pending)
        self._pending.clear()
        return events

    def reset(self) -> None:
        if self._detector is not None:
            self._detector.reset()
        self._buffer.clear()
        self._pending.clear()

    def close(self) -> None:
        self._detector = None
        self._buffer.clear()
        self._pending.clear()
