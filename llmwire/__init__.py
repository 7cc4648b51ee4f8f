"""Request and response models, form encoding, request building and JSON schema helpers for OpenAI-compatible HTTP APIs."""

__version__ = "0.1.0"