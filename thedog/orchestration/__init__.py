"""Headless application state that a presentation layer renders."""
