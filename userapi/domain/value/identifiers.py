"""Typed identifiers.

``UserId`` is a plain UUID at runtime; the NewType keeps user IDs from
being passed where some other UUID is expected.
"""

from typing import NewType
from uuid import UUID

UserId = NewType("UserId", UUID)
