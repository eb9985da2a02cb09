"""Legal assistant: retrieval-augmented answers to legal questions."""

__version__ = "1.0.0"
