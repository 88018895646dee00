"""
Data Download Module

Optional fetch of the public datasets used by the gallery:
- Restaurant tips (violin-plot example)
"""
