"""Utility helpers for TaskFlow."""
