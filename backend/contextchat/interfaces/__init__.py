"""Abstract interfaces for repositories and providers."""
