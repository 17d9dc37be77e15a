"""Configuration, errors, validation, security and logging."""
