"""Output reporters for generating attribution documents.

This module provides reporters for rendering resolved module licenses.
"""

from gocomply.reporters.base import BaseReporter
from gocomply.reporters.text import DIVIDER, TextReporter

__all__ = ["BaseReporter", "DIVIDER", "TextReporter"]
