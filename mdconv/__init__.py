"""Markdown to HTML converter with live preview."""
