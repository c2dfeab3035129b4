"""Core building blocks: crypto, HTTP API, models, errors and logging."""
