"""Reusable support libraries bundled with histconsole."""
