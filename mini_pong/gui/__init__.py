"""
PyGame front end for Mini Pong
"""
