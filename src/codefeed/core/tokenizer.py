"""
Token counting functionality for codefeed.

This module provides token counting using OpenAI's tiktoken library.
Counting only happens when a report is requested, so the encoder is
created on demand by the CLI rather than at import time.
"""

import logging
from typing import Any, Optional

import tiktoken

from .errors import TokenizerError

logger = logging.getLogger(__name__)


class TokenCounter:
    """
    Handles token counting for text content.

    Text is encoded with ``encode_ordinary`` so that special-token markers
    appearing inside source files are counted as plain text.
    """

    def __init__(self, encoding_name: str = "cl100k_base"):
        """
        Initialize the token counter.

        Args:
            encoding_name: The name of the tiktoken encoding to use.
                         Default is cl100k_base (used by GPT-4).

        Raises:
            TokenizerError: If the encoding cannot be loaded.
        """
        self.encoding_name = encoding_name
        self.encoder: Optional[Any] = None

        try:
            self.encoder = tiktoken.get_encoding(encoding_name)
        except Exception as e:
            raise TokenizerError(f"Failed to get BPE tokenizer '{encoding_name}': {e}") from e

        logger.debug(f"Loaded token encoder '{encoding_name}'")

    def count(self, text: str) -> int:
        """
        Count tokens in the given text.

        Args:
            text: The text to count tokens for.

        Returns:
            Number of tokens.
        """
        if not text:
            return 0
        return len(self.encoder.encode_ordinary(text))

