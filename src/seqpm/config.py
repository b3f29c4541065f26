"""Configuration management for the sequential pattern mining package."""
import os
from dataclasses import dataclass
import logging


@dataclass
class SequenceMiningConfig:
    """Configuration for sequence handling.

    Attributes:
        verbose: Enable verbose (DEBUG) logging
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        check_timestamp_order: Reject itemsets appended out of temporal order
        string_padding: Number of trailing spaces in sequence debug strings
    """

    verbose: bool = False
    log_level: str = "WARNING"
    check_timestamp_order: bool = False
    string_padding: int = 4

    def __post_init__(self):
        """Initialize configuration from environment variables."""
        # Override with environment variables if set
        if os.getenv('SEQPM_VERBOSE'):
            self.verbose = os.getenv('SEQPM_VERBOSE', '').lower() == 'true'

        if os.getenv('SEQPM_LOG_LEVEL'):
            self.log_level = os.getenv('SEQPM_LOG_LEVEL', 'WARNING')

        if os.getenv('SEQPM_CHECK_TIMESTAMP_ORDER'):
            self.check_timestamp_order = os.getenv('SEQPM_CHECK_TIMESTAMP_ORDER', '').lower() == 'true'

        if os.getenv('SEQPM_STRING_PADDING'):
            self.string_padding = int(os.getenv('SEQPM_STRING_PADDING', '4'))

    def setup_logging(self):
        """Configure logging based on settings."""
        if self.verbose:
            log_level = logging.DEBUG
        else:
            log_level = getattr(logging, self.log_level.upper(), logging.WARNING)
        logging.basicConfig(
            level=log_level,
            format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )


# Global configuration instance
config = SequenceMiningConfig()
