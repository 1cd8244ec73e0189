"""Independent heuristic detectors, one per signal family."""

from phishscope.analyzers.behavioral_analyzer import BehavioralAnalyzer
from phishscope.analyzers.client_signal_analyzer import ClientSignalAnalyzer
from phishscope.analyzers.content_analyzer import ContentAnalyzer
from phishscope.analyzers.interfaces import BaseDetector
from phishscope.analyzers.sender_analyzer import SenderAnalyzer
from phishscope.analyzers.url_analyzer import URLAnalyzer

__all__ = [
    "BaseDetector",
    "BehavioralAnalyzer",
    "ClientSignalAnalyzer",
    "ContentAnalyzer",
    "SenderAnalyzer",
    "URLAnalyzer",
]
