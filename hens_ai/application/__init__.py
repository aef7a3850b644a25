"""Application layer — configuration schemas, message building and ports."""
