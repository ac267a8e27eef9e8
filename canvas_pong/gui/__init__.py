"""
PyGame front end of Canvas Pong
"""
