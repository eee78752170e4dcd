"""Profile name - the label that implicitly groups users."""

from typing import NewType

ProfileName = NewType("ProfileName", str)
