"""Substitution tables authorizing copies across declared types."""

from structcopy.core.substitution.models import EMPTY, SubstitutionTable

__all__ = [
    "EMPTY",
    "SubstitutionTable",
]
