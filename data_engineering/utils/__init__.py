"""Shared data utilities (validation)"""
