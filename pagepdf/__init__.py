"""pagepdf - render web pages to PDF downloads with headless Chromium."""

__version__ = "0.1.0"
