"""
eui48/exceptions.py - Exceptions for eui48
"""


class EUIException(Exception):
    pass


class InvalidInput(EUIException, ValueError):
    pass
