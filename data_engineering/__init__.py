"""
Data Engineering Module for the Survey Plot Gallery

This module contains the data side of every chart example:
1. synthetic/ - Seeded example tables
2. reshape   - Wide-to-long reshaping for faceted plots
3. download/ - Optional fetch of the public tips dataset
4. features/ - Chart-specific aggregates
5. utils/    - Table validation

Usage:
    from data_engineering.synthetic import generate_tumor_measurements
    from data_engineering.reshape import to_long
"""

__version__ = "1.0.0"
