"""Shared utilities for lgremote."""
