"""Violation report forwarding."""
