"""Arquillian test scaffolding and deployment export for Maven projects."""

__version__ = "0.1.0"
