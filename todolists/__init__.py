"""Session-backed todo lists served with FastAPI."""

__version__ = "1.0.0"
