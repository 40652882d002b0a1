"""Case sensitivity policy for string comparisons."""

from __future__ import annotations

import re
from enum import Enum

from classfilter.domain.exceptions import InvalidCasePolicyError


class CaseSensitivity(Enum):
    """Sensitive or insensitive string comparison.

    Value is the literal used in canonical filter text.
    """

    SENSITIVE = "Sensitive"
    INSENSITIVE = "Insensitive"

    @classmethod
    def for_name(cls, token: str) -> CaseSensitivity:
        """Parse case policy literal (case-insensitive).

        Args:
            token: "Sensitive" or "Insensitive" in any letter case.

        Returns:
            Matching policy.

        Raises:
            InvalidCasePolicyError: Token matches neither literal.
        """
        folded = token.strip().casefold()
        for policy in cls:
            if policy.value.casefold() == folded:
                return policy
        raise InvalidCasePolicyError(token)

    @property
    def is_sensitive(self) -> bool:
        return self is CaseSensitivity.SENSITIVE

    @property
    def regex_flags(self) -> re.RegexFlag:
        """Flags applied when compiling patterns under this policy."""
        return re.NOFLAG if self.is_sensitive else re.IGNORECASE

    # Insensitive comparisons go through re with regex_flags, so Name,
    # Prefix and Suffix fold case exactly like Wildcard and Regex.

    def equals(self, text: str, other: str) -> bool:
        """Compare two strings under this policy."""
        if self.is_sensitive:
            return text == other
        return re.fullmatch(re.escape(other), text, self.regex_flags) is not None

    def starts_with(self, text: str, prefix: str) -> bool:
        if self.is_sensitive:
            return text.startswith(prefix)
        return re.match(re.escape(prefix), text, self.regex_flags) is not None

    def ends_with(self, text: str, suffix: str) -> bool:
        if self.is_sensitive:
            return text.endswith(suffix)
        return re.search(re.escape(suffix) + r"\Z", text, self.regex_flags) is not None
