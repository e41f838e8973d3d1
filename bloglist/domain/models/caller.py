"""
Caller identity for a single request.

A caller is either ``AuthenticatedCaller`` (resolved from a verified token)
or ``AnonymousCaller``. Consumers branch on the concrete type instead of
checking for ``None``.
"""

# Standard library imports
from dataclasses import dataclass
from typing import Optional, Union


@dataclass(frozen=True)
class AuthenticatedCaller:
    """Caller whose token verified and carried a user id"""
    id: str
    username: Optional[str] = None


@dataclass(frozen=True)
class AnonymousCaller:
    """No token, or a token that did not resolve to a user id"""


Caller = Union[AuthenticatedCaller, AnonymousCaller]

ANONYMOUS = AnonymousCaller()
