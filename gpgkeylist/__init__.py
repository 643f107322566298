""" gpgkeylist :: GnuPG key listings for Python
"""

from .listing import KeyListing
from .listing import KeyRecord
from .listing import KeyRecordParser
from .listing import parse_key

__all__ = ['constants',
           'errors',
           'KeyListing',
           'KeyRecord',
           'KeyRecordParser',
           'parse_key', ]
