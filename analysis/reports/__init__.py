"""Gallery figures and the figure generation CLI"""
