"""Set GitHub commit statuses with rate-limit-aware retries."""

__version__ = "0.1.0"
