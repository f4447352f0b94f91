"""Minimal pastebin web application."""
