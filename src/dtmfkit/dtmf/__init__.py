"""DTMF tone detection."""

from dtmfkit.dtmf.base import DTMFDetector, DTMFEvent
from dtmfkit.dtmf.debounce import Debouncer
from dtmfkit.dtmf.detector import DigitDetector
from dtmfkit.dtmf.evaluator import evaluate_block
from dtmfkit.dtmf.goertzel import Resonator, ToneBank
from dtmfkit.dtmf.provider import GoertzelDTMFDetector
from dtmfkit.dtmf.sink import DigitBuffer, DigitRecord, DigitSink

__all__ = [
    "Debouncer",
    "DigitBuffer",
    "DigitDetector",
    "DigitRecord",
    "DigitSink",
    "DTMFDetector",
    "DTMFEvent",
    "GoertzelDTMFDetector",
    "Resonator",
    "ToneBank",
    "evaluate_block",
]
