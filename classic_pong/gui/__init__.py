"""
PyGame front end for Classic Pong
"""
