"""Readers for MSBuild solution and project files."""
