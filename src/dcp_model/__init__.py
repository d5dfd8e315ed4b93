"""DCP container model - declarative Container resource for the orchestrator."""

__version__ = "0.1.0"
