"""Classifier configuration."""

from typeconform.config.load import load_classifier_options
from typeconform.config.options import OPTION_KEYS, ClassifierOptions

__all__ = [
    "OPTION_KEYS",
    "ClassifierOptions",
    "load_classifier_options",
]
