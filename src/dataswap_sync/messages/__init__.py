"""Chain message decoding."""

from dataswap_sync.messages.decoder import (
    CorrelationExtractor,
    MessageDecoder,
    dataset_and_matching_correlation,
    dataset_correlation,
    no_correlation,
)

__all__ = [
    "CorrelationExtractor",
    "MessageDecoder",
    "dataset_and_matching_correlation",
    "dataset_correlation",
    "no_correlation",
]
