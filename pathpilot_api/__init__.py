"""PathPilot API - career gateway over Gemini with static fallbacks."""

__version__ = "1.0.0"
