""" types.py
"""
import re

from typing import Optional

__all__ = ['KeyToken']


class KeyToken(str):
    """
    A subclass of ``str`` holding the key column of a listing line, such as ``1024D/543C3595``.
    Can be compared using == and != to ``str`` and other :py:obj:`KeyToken` instances.

    The token is never validated; accessors that can not find their part return an empty value instead.
    """
    _shape = re.compile(r'^(?P<size>\d+)?(?P<algorithm>[^/\d][^/]*)?/(?P<keyid>.*)$')

    def _parts(self):
        m = self._shape.match(self)
        if m is None:
            return None, "", str(self)
        size = int(m.group('size')) if m.group('size') else None
        return size, m.group('algorithm') or "", m.group('keyid')

    @property
    def keyid(self) -> str:
        """The part after the first ``/``, or the whole token if there is no ``/``"""
        return self._parts()[2]

    @property
    def size(self) -> Optional[int]:
        """The key size in bits, if the token starts with one"""
        return self._parts()[0]

    @property
    def algorithm(self) -> str:
        """The text between the key size and the ``/``, such as ``D``, ``g`` or ``rsa2048``"""
        return self._parts()[1]

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}({str(self)})'
