"""Core primitives: error kinds, exceptions, IDs, validation rules."""
