"""Core type definitions for structcopy."""

from collections.abc import Mapping
from typing import TypeAlias

SubsLike: TypeAlias = Mapping[type, type] | None
"""Anything accepted where a substitution table is expected.

Plain dicts are wrapped in a read-only `SubstitutionTable` at the call boundary;
None means no substitutions.
"""
