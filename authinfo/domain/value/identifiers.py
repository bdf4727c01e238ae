"""Strongly typed identifiers for auth records.

Using NewType keeps record IDs from being mixed up with other strings
such as provider keys.
"""

from typing import NewType

AuthInfoId = NewType("AuthInfoId", str)
