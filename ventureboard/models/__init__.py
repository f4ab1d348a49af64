"""Typed result models returned by the checklist engine."""
