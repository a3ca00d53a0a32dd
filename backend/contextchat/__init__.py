"""Context Chat backend: chat proxy to a hosted NLP chatbot with local history."""

__version__ = "0.1.0"
