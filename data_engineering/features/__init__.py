"""Chart-specific aggregates"""
