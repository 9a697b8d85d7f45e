"""Application use cases, one class per operation, each exposing `execute`."""
