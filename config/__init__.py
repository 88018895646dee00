"""
Project configuration: paths and plot style
"""
