"""Annotator module for image labeling providers.

Provides:
    - Annotator: Abstract base class for provider backends
    - AnnotatorRegistry: Registration-based factory (Open/Closed Principle)
    - GoogleVisionAnnotator: Cloud Vision batch label detection
    - MicrosoftVisionAnnotator: Computer Vision single-image analysis
    - GoogleSessionMixin / SubscriptionKeyMixin: Lazy credential/session mixins
    - run: Orchestrates loading, batching, dispatch and printing
"""

from .base import Annotator
from .client import GoogleSessionMixin, SubscriptionKeyMixin
from .factory import AnnotatorRegistry
from .google_annotator import GoogleVisionAnnotator
from .microsoft_annotator import MicrosoftVisionAnnotator
from .runner import run

__all__ = [
    "Annotator",
    "AnnotatorRegistry",
    "GoogleSessionMixin",
    "GoogleVisionAnnotator",
    "MicrosoftVisionAnnotator",
    "SubscriptionKeyMixin",
    "run",
]
