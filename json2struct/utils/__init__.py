"""Shared utilities: exceptions, logging and helpers."""
