"""Pub golf scoring service."""
