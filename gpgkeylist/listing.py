""" listing.py

this is where the text of a key listing gets turned into key records
"""
import collections.abc
import logging
import re
import warnings

from datetime import datetime

from .constants import DEFAULT_DATE_FORMATS
from .constants import NO_EXPIRATION
from .constants import RecordLabel

from .errors import DateParseError
from .errors import MalformedInputError

from .types import KeyToken

__all__ = ['KeyRecord',
           'KeyRecordParser',
           'KeyListing',
           'parse_key']


def _split_lines(raw):
    # '\r' and '\n' both end a line; empty lines carry nothing
    return [line for line in re.split(r'[\r\n]', raw) if line]


class KeyRecord(object):
    __slots__ = ('_raw', '_key', '_key_expiration', '_user_name', '_user_id', '_subkey', '_subkey_expiration')

    @classmethod
    def from_raw(cls, raw, parser=None):
        """
        Parse a block of key listing text.

        :param raw: The listing text of a single key: a key line, an identity line, and an optional sub-key line.
        :type raw: ``str``
        :param parser: The parser to use. If not specified, one with the default date formats is used.
        :type parser: :py:obj:`KeyRecordParser`
        :raises: :py:exc:`~gpgkeylist.errors.MalformedInputError` if a required line or field is missing
        :raises: :py:exc:`~gpgkeylist.errors.DateParseError` if a date field can not be parsed
        :returns: :py:obj:`KeyRecord`
        """
        if parser is None:
            parser = _default_parser
        return parser.parse(raw)

    def __init__(self, raw, key, key_expiration, user_name="", user_id="", subkey="", subkey_expiration=NO_EXPIRATION):
        """
        KeyRecord objects are read-only views of one key in the output of ``gpg --list-keys`` or
        ``gpg --list-secret-keys``. They are normally created by :py:meth:`KeyRecord.from_raw`.

        A record without a sub-key has an empty ``subkey`` and a ``subkey_expiration`` of
        :py:obj:`~gpgkeylist.constants.NO_EXPIRATION`.
        """
        if bool(subkey) != (subkey_expiration != NO_EXPIRATION):
            raise ValueError("subkey and subkey_expiration must either both be given or both be omitted")

        for attr, val in [('_raw', raw),
                          ('_key', KeyToken(key)),
                          ('_key_expiration', key_expiration),
                          ('_user_name', user_name),
                          ('_user_id', user_id),
                          ('_subkey', KeyToken(subkey)),
                          ('_subkey_expiration', subkey_expiration)]:
            object.__setattr__(self, attr, val)

    def __setattr__(self, name, value):
        raise AttributeError("Read-only attribute")

    def __delattr__(self, name):
        raise AttributeError("Read-only attribute")

    def __reduce__(self):
        return (self.__class__, self._astuple())

    @property
    def raw(self):
        """The listing text this record was parsed from, exactly as it was given"""
        return self._raw

    @property
    def key(self):
        """The key column of the primary key line, such as ``1024D/543C3595``"""
        return self._key

    @property
    def keyid(self):
        return self._key.keyid

    @property
    def key_expiration(self):
        """The date printed on the primary key line, as a :py:obj:`~datetime.datetime`"""
        return self._key_expiration

    @property
    def user_name(self):
        """The name on the identity line, or an empty string if the line has no ``<...>`` address"""
        return self._user_name

    @property
    def user_id(self):
        """The address between ``<`` and ``>`` on the identity line, or an empty string"""
        return self._user_id

    @property
    def subkey(self):
        """The key column of the sub-key line. Empty if there is no sub-key."""
        return self._subkey

    @property
    def subkey_expiration(self):
        """
        The date printed on the sub-key line. If there is no sub-key, this is
        :py:obj:`~gpgkeylist.constants.NO_EXPIRATION`; check :py:attr:`has_subkey` rather than comparing against it.
        """
        return self._subkey_expiration

    @property
    def has_subkey(self):
        return self._subkey != ""

    @property
    def is_public(self):
        """``False`` if the primary key line is a secret key (``sec``) line, otherwise ``True``"""
        lines = _split_lines(self._raw)
        label = RecordLabel.classify(lines[0]) if lines else None
        return label is not RecordLabel.Secret

    def _astuple(self):
        return (self._raw, str(self._key), self._key_expiration, self._user_name, self._user_id,
                str(self._subkey), self._subkey_expiration)

    def __eq__(self, other):
        if isinstance(other, KeyRecord):
            return self._astuple() == other._astuple()
        return NotImplemented

    def __ne__(self, other):
        eq = self.__eq__(other)
        return eq if eq is NotImplemented else not eq

    def __hash__(self):
        return hash(self._astuple())

    def __str__(self):
        return self._raw

    def __repr__(self):
        return "<KeyRecord [{:s}][{:s}] at 0x{:02X}>".format(str(self._key), self._user_id, id(self))


class KeyRecordParser(object):
    # validity printed by GnuPG 2.x between the uid label and the name, e.g. '[ultimate]' or '[ unknown]'
    _validity_pattern = re.compile(r'^\[ *(?:ultimate|full|marginal|never|unknown|undef|expired|revoked) *\]')

    def __init__(self, date_formats=DEFAULT_DATE_FORMATS):
        """
        KeyRecordParser turns the listing text of one key into a :py:obj:`KeyRecord`.
        Parsers keep no state between calls and may be shared freely.

        :param date_formats: ``strptime`` formats to try, in order, on the date column of key lines.
        :type date_formats: ``tuple`` of ``str``
        """
        self._date_formats = tuple(date_formats)
        if not self._date_formats:
            raise ValueError("At least one date format is required")

    @property
    def date_formats(self):
        return self._date_formats

    def parse(self, raw):
        """
        :param raw: The listing text of a single key.
        :type raw: ``str``
        :raises: :py:exc:`~gpgkeylist.errors.MalformedInputError` if a required line or field is missing
        :raises: :py:exc:`~gpgkeylist.errors.DateParseError` if a date field can not be parsed
        :returns: :py:obj:`KeyRecord`
        """
        if not isinstance(raw, str):
            raise TypeError("Expected: str. Got: {:s}".format(raw.__class__.__name__))

        lines = _split_lines(raw)
        if len(lines) < 2:
            raise MalformedInputError("Expected a key line and an identity line, got {:d} line(s)".format(len(lines)))

        key, key_expiration = self._parse_key_line(lines[0])
        user_name, user_id = self._parse_uid_line(lines[1])

        subkey, subkey_expiration = "", NO_EXPIRATION
        if len(lines) > 2:
            subkey, subkey_expiration = self._parse_key_line(lines[2])

        return KeyRecord(raw, key, key_expiration,
                         user_name=user_name,
                         user_id=user_id,
                         subkey=subkey,
                         subkey_expiration=subkey_expiration)

    def _parse_key_line(self, line):
        fields = [f for f in line.split(' ') if f]
        if len(fields) < 3:
            raise MalformedInputError("Expected at least 3 fields in key line: {!r}".format(line))

        return fields[1], self._parse_date(fields[2])

    def _parse_date(self, text):
        error = None
        for fmt in self._date_formats:
            try:
                return datetime.strptime(text, fmt)

            except ValueError as e:
                error = e

        raise DateParseError("Could not parse {!r} as a date using any of {!r}".format(text, self._date_formats)) from error

    def _parse_uid_line(self, line):
        lt = line.find('<')
        gt = line.find('>', lt + 1) if lt >= 0 else -1
        if gt < 0:
            logging.debug("No <user id> found in identity line {!r}".format(line))
            return "", ""

        # name is everything before the '<', less the record label
        name = line[:lt].strip()
        label = RecordLabel.classify(name)
        if label is not None and label.is_identity:
            parts = name.split(None, 1)
            name = parts[1] if len(parts) > 1 else ""

        m = self._validity_pattern.match(name)
        if m is not None:
            name = name[m.end():]

        return name.strip(), line[lt + 1:gt]


_default_parser = KeyRecordParser()


def parse_key(raw):
    """
    Parse the listing text of a single key into a :py:obj:`KeyRecord` using the default date formats.
    """
    return _default_parser.parse(raw)


class KeyListing(collections.abc.Container, collections.abc.Iterable, collections.abc.Sized):
    def __init__(self, text=None, parser=None):
        """
        KeyListing objects hold the records of every key in the complete output of ``gpg --list-keys`` or
        ``gpg --list-secret-keys``, in the order they were listed.

        Records can be looked up by key column, key id, user id, or user name::

            >>> listing = KeyListing(text)
            >>> "543C3595" in listing
            True
            >>> listing.get("benton@starksoft.com").user_name
            'Benton Stark'

        :param text: Listing output to load right away.
        :type text: ``str``
        :param parser: The parser used for each key. If not specified, one with the default date formats is used.
        :type parser: :py:obj:`KeyRecordParser`
        """
        super(KeyListing, self).__init__()
        self._parser = parser if parser is not None else _default_parser
        self._records = []

        if text is not None:
            self.load(text)

    def __contains__(self, alias):
        return any(self._aliases_of(record, alias) for record in self._records)

    def __len__(self):
        return len(self._records)

    def __iter__(self):
        return iter(self._records)

    @staticmethod
    def _aliases_of(record, alias):
        aliases = {str(record.key), record.keyid, record.user_id, record.user_name}
        if record.has_subkey:
            aliases |= {str(record.subkey), record.subkey.keyid}
        aliases.discard("")
        return alias in aliases

    def get(self, alias):
        """
        :param alias: A key column, key id, user id, or user name.
        :type alias: ``str``
        :raises: ``KeyError`` if no record matches
        :returns: the first :py:obj:`KeyRecord` that matches ``alias``
        """
        for record in self._records:
            if self._aliases_of(record, alias):
                return record

        raise KeyError(alias)

    def _blocks(self, text):
        block = None
        for line in _split_lines(text):
            label = RecordLabel.classify(line)

            if label is not None and label.is_primary:
                if block is not None:
                    yield block
                block = [line]

            elif block is None:
                # keyring path and the '-----' rule under it
                logging.debug("Discarded line before the first key: {!r}".format(line))

            else:
                block.append(line)

        if block is not None:
            yield block

    def _shape(self, block):
        # the parser reads lines by position: key, first identity, then first sub-key
        labels = [(RecordLabel.classify(line), line) for line in block[1:]]
        uids = [line for label, line in labels if label is RecordLabel.UserID]
        uids += [line for label, line in labels if label is RecordLabel.UserAttribute]
        subs = [line for label, line in labels if label is not None and label.is_subkey]

        if not uids:
            raise MalformedInputError("Key {!r} has no identity line".format(block[0]))

        dropped = len(block) - 1 - len(uids[:1]) - len(subs[:1])
        if len(uids) > 1 or len(subs) > 1:
            warnings.warn("Key {!r} has {:d} identities and {:d} sub-keys; only the first of each is kept"
                          "".format(block[0], len(uids), len(subs)))

        elif dropped:
            logging.debug("Discarded {:d} unlabelled line(s) from key {!r}".format(dropped, block[0]))

        return '\n'.join(block[:1] + uids[:1] + subs[:1])

    def load(self, text):
        """
        Load every key in a listing.

        :param text: Output of a key listing command.
        :type text: ``str``
        :raises: :py:exc:`~gpgkeylist.errors.MalformedInputError` or :py:exc:`~gpgkeylist.errors.DateParseError`
                 if any key in the listing can not be parsed. Nothing is loaded in that case.
        :returns: a ``list`` of the :py:obj:`KeyRecord` objects that were loaded
        """
        loaded = [self._parser.parse(self._shape(block)) for block in self._blocks(text)]
        self._records.extend(loaded)
        return loaded
