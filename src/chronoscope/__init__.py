"""
Chronoscope

Pannable, zoomable historical timeline for PyQt6 applications.
"""

__version__ = "0.1.0"
