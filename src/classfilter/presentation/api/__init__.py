"""Public API: filter builders and evaluation shortcuts."""

from classfilter.presentation.api.dsl import (
    accept_locator,
    accept_name,
    accept_type,
    and_,
    has_annotation,
    name_filter,
    not_,
    or_,
    prefix,
    regex,
    suffix,
    wildcard,
)

__all__ = [
    "accept_locator",
    "accept_name",
    "accept_type",
    "and_",
    "has_annotation",
    "name_filter",
    "not_",
    "or_",
    "prefix",
    "regex",
    "suffix",
    "wildcard",
]
