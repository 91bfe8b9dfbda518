"""Release workflow phase detection for changeset-based pipelines."""

__version__ = "0.1.0"
