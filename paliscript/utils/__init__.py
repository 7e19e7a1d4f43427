"""Shared utilities for the outer layers."""
