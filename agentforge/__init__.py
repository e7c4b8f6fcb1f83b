"""Data models, benchmark loaders and scoring helpers for evaluating AI agents."""

__version__ = "0.1.5"