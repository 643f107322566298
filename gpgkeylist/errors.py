""" errors.py
"""

__all__ = ('GnuPGKeyError',
           'MalformedInputError',
           'DateParseError',)


class GnuPGKeyError(Exception):
    """Raised as a general error in gpgkeylist"""
    pass


class MalformedInputError(GnuPGKeyError):
    """Raised when key listing text is missing a required line or field"""
    pass


class DateParseError(GnuPGKeyError):
    """Raised when the date field of a key line can not be parsed"""
    pass
