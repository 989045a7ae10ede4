"""Strongly typed identifiers for host entities referenced by invitations.

The host platform owns projects, roles, groups and users; invitations only
keep their identifiers and resolve them through the host when needed.
"""

from typing import NewType

UserId = NewType("UserId", int)
ProjectId = NewType("ProjectId", str)
RoleId = NewType("RoleId", str)
GroupKey = NewType("GroupKey", str)
