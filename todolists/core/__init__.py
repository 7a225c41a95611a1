"""Core utilities and shared application primitives.

Validation, completion and sorting are pure functions over the models in
``models``; configuration, errors and HTTP helpers sit alongside them.
"""
