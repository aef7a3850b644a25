"""Infrastructure layer — HTTP adapter and logging setup."""
