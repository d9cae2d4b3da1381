"""Support helpers for analyzers."""
