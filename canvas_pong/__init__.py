"""
Canvas Pong: a two-paddle ball game against a scripted opponent
"""

__version__ = "1.0.0"
