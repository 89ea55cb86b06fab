"""Outbound clients for external collaborators."""
