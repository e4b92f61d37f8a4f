"""AudioFrame data model for inbound telephony audio."""

from __future__ import annotations

import struct
from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import StrEnum, unique
from typing import Any

from dtmfkit.config import DEFAULT_SAMPLE_RATE
from dtmfkit.g711 import alaw_decode, ulaw_decode


@unique
class AudioEncoding(StrEnum):
    """Sample encodings an AudioFrame can carry."""

    PCM16 = "pcm16"
    """Signed linear PCM, little-endian."""

    PCMU = "pcmu"
    """G.711 mu-law, one byte per sample."""

    PCMA = "pcma"
    """G.711 A-law, one byte per sample."""


_COMPANDED = (AudioEncoding.PCMU, AudioEncoding.PCMA)


@dataclass
class AudioFrame:
    """A single frame of inbound audio handed to a DTMF detector.

    Detectors may annotate the metadata dict with their results
    (e.g. ``metadata["dtmf"]``). G.711 frames use ``sample_width=1``;
    :meth:`samples` expands them to int16.
    """

    data: bytes
    """Raw audio bytes (PCM little-endian, or G.711 codewords)."""

    sample_rate: int = DEFAULT_SAMPLE_RATE
    """Sample rate in Hz."""

    channels: int = 1
    """Number of audio channels."""

    sample_width: int = 2
    """Bytes per sample (2 = 16-bit PCM, 1 = G.711)."""

    encoding: AudioEncoding = AudioEncoding.PCM16
    """How ``data`` is encoded."""

    timestamp_ms: float | None = None
    """Timestamp in milliseconds (relative to session start)."""

    metadata: dict[str, Any] = field(default_factory=dict)
    """Detectors annotate results here."""

    def __post_init__(self) -> None:
        if not isinstance(self.data, bytes):
            raise ValueError("AudioFrame.data must be bytes")
        if self.sample_rate <= 0 or self.sample_rate > 192_000:
            raise ValueError(f"sample_rate must be between 1 and 192000, got {self.sample_rate}")
        if self.channels not in (1, 2):
            raise ValueError(f"channels must be 1 or 2, got {self.channels}")
        if self.sample_width not in (1, 2, 4):
            raise ValueError(f"sample_width must be 1, 2, or 4, got {self.sample_width}")
        self.encoding = AudioEncoding(self.encoding)
        if self.encoding in _COMPANDED and self.sample_width != 1:
            raise ValueError(
                f"{self.encoding} frames must have sample_width 1, got {self.sample_width}"
            )
        frame_align = self.sample_width * self.channels
        if len(self.data) % frame_align != 0:
            raise ValueError(
                f"data length ({len(self.data)}) must be divisible by "
                f"sample_width * channels ({frame_align})"
            )

    @classmethod
    def from_samples(
        cls, samples: Sequence[int], sample_rate: int = DEFAULT_SAMPLE_RATE, **kwargs: Any
    ) -> AudioFrame:
        """Build a mono 16-bit frame from int16 sample values."""
        data = struct.pack(f"<{len(samples)}h", *samples)
        return cls(data=data, sample_rate=sample_rate, **kwargs)

    @property
    def num_samples(self) -> int:
        """Samples per channel."""
        return len(self.data) // (self.sample_width * self.channels)

    @property
    def duration_ms(self) -> float:
        return self.num_samples * 1000.0 / self.sample_rate

    def samples(self) -> list[int] | tuple[int, ...]:
        """Decode the frame into signed 16-bit sample values."""
        if self.encoding == AudioEncoding.PCMU:
            return ulaw_decode(self.data)
        if self.encoding == AudioEncoding.PCMA:
            return alaw_decode(self.data)
        if self.sample_width != 2:
            raise ValueError(f"samples() requires 16-bit PCM, got sample_width={self.sample_width}")
        n = len(self.data) // 2
        return struct.unpack(f"<{n}h", self.data)
