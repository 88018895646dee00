"""
Analysis Module

Chart building and figure generation for the survey plot gallery

Modules:
- visualization: Reusable chart and map builders
- reports: Gallery figures and the generate-all CLI
"""

__version__ = "1.0.0"
