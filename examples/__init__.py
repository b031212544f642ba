"""Runnable taproom examples."""
