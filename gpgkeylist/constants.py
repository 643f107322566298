""" constants.py
"""
from __future__ import annotations

from datetime import datetime
from enum import Enum

from typing import Optional

__all__ = [
    'RecordLabel',
    'DEFAULT_DATE_FORMATS',
    'NO_EXPIRATION',
]


class RecordLabel(Enum):
    #: Public primary key
    Public = 'pub'
    #: Secret primary key
    Secret = 'sec'
    #: Public sub-key
    PublicSub = 'sub'
    #: Secret sub-key
    SecretSub = 'ssb'
    #: User ID
    UserID = 'uid'
    #: User attribute, such as a photo ID
    UserAttribute = 'uat'

    @classmethod
    def classify(cls, line: str) -> Optional[RecordLabel]:
        """
        Return the label that starts ``line``, or ``None`` if the line does not start with a known label.
        """
        fields = line.split(None, 1)
        if not fields:
            return None

        # gpg appends '#' to secret keys that are not available and '>' to keys stored on a smartcard
        label = fields[0].rstrip('#>')
        try:
            return cls(label)

        except ValueError:
            return None

    @property
    def is_primary(self) -> bool:
        return self in {RecordLabel.Public, RecordLabel.Secret}

    @property
    def is_subkey(self) -> bool:
        return self in {RecordLabel.PublicSub, RecordLabel.SecretSub}

    @property
    def is_secret(self) -> bool:
        return self in {RecordLabel.Secret, RecordLabel.SecretSub}

    @property
    def is_identity(self) -> bool:
        return self in {RecordLabel.UserID, RecordLabel.UserAttribute}

    def __str__(self) -> str:
        return self.value


#: ``strptime`` formats tried, in order, on the date field of a key line.
#: GnuPG renders dates as ISO 8601 by default, regardless of locale.
DEFAULT_DATE_FORMATS = ('%Y-%m-%d',
                        '%Y-%m-%dT%H:%M:%S',)

#: Stands in for the sub-key date of a record that has no sub-key.
NO_EXPIRATION = datetime.max
