"""Text filters, counters, histograms, C source tools, Base32/Base64, TOTP and UUIDv7."""

__version__ = "0.1.0"