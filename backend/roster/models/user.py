"""
Roster Backend — User Record
==============================

What:  The record type held by the in-memory user store.
How:   Plain mutable dataclasses, changed in place by UserService.update.
       They never cross the HTTP boundary directly; UserResponse
       (schemas/user.py) serializes them with from_attributes.
"""

from dataclasses import dataclass
from enum import Enum


class Role(str, Enum):
    """Fixed set of roles a user can hold. Values serialize as the names."""

    TEACHER = "TEACHER"
    STUDENT = "STUDENT"
    ADMIN = "ADMIN"


@dataclass
class User:
    """
    A single user record.

    Fields:
        id:   Positive integer assigned by the store; never changes afterwards
        name: Non-empty display name
        age:  Integer, at least 13
        role: One of Role
    """

    id: int
    name: str
    age: int
    role: Role
