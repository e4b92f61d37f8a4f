"""dtmfkit - DTMF keypress detection for 16-bit PCM and G.711 audio streams."""

from dtmfkit._version import __version__
from dtmfkit.audio_frame import AudioEncoding, AudioFrame
from dtmfkit.config import BLOCK_SIZE, DEFAULT_SAMPLE_RATE, DTMFConfig
from dtmfkit.dtmf import (
    Debouncer,
    DigitBuffer,
    DigitDetector,
    DigitRecord,
    DigitSink,
    DTMFDetector,
    DTMFEvent,
    GoertzelDTMFDetector,
    Resonator,
    ToneBank,
    evaluate_block,
)
from dtmfkit.errors import ConfigurationError, DTMFKitError
from dtmfkit.g711 import alaw_decode, alaw_encode, ulaw_decode, ulaw_encode

__all__ = [
    "BLOCK_SIZE",
    "DEFAULT_SAMPLE_RATE",
    "AudioEncoding",
    "AudioFrame",
    "ConfigurationError",
    "Debouncer",
    "DigitBuffer",
    "DigitDetector",
    "DigitRecord",
    "DigitSink",
    "DTMFConfig",
    "DTMFDetector",
    "DTMFEvent",
    "DTMFKitError",
    "GoertzelDTMFDetector",
    "Resonator",
    "ToneBank",
    "__version__",
    "alaw_decode",
    "alaw_encode",
    "evaluate_block",
    "ulaw_decode",
    "ulaw_encode",
]
