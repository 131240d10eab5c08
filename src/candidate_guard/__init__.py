"""candidate-guard: keep main-branch workflows free of candidate-branch references."""

__version__ = "0.1.0"
