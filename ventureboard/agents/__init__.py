"""Agent integration for ventureboard."""
