"""
Text/binary classification for codefeed.

This is a heuristic, not an encoding detector: a file counts as text when
none of its leading bytes is a control character other than tab, newline
or carriage return. High-bit bytes (UTF-8 multibyte sequences, Latin-1)
are accepted as text.
"""

import logging
from pathlib import Path
from typing import Union

from .models import Config

logger = logging.getLogger(__name__)

# Control characters allowed in text
TEXT_CONTROL_BYTES = frozenset((0x09, 0x0a, 0x0d))


class FileClassifier:
    """Decides whether a file is text by sampling its first bytes."""

    def __init__(self, config: Config):
        self.sample_size = config.sample_size

    @staticmethod
    def is_text_sample(sample: bytes) -> bool:
        """
        Check a byte sample for disallowed control characters.

        Args:
            sample: Leading bytes of a file.

        Returns:
            True if the sample looks like text. An empty sample is text.
        """
        return not any(byte < 0x20 and byte not in TEXT_CONTROL_BYTES for byte in sample)

    def is_text(self, path: Union[str, Path]) -> bool:
        """
        Classify a file by reading at most ``sample_size`` bytes.

        Args:
            path: Path to the file.

        Returns:
            True for text, False for binary.

        Raises:
            OSError: If the file cannot be opened or the read fails.
        """
        with open(path, 'rb') as f:
            sample = f.read(self.sample_size)

        result = self.is_text_sample(sample)
        if not result:
            logger.debug(f"Classified {path} as binary")
        return result
