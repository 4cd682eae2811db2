"""Enums for type-safe constants in railstart."""

from enum import Enum


class FailurePolicy(str, Enum):
    """What a call site does when an external command exits non-zero.

    Every Command Runner invocation made by the pipeline carries one of these
    tags, so ignoring a failure is always an explicit choice.
    """

    ABORT_ON_FAILURE = "abort"
    WARN_AND_CONTINUE = "warn"

    @classmethod
    def from_string(cls, value: str) -> "FailurePolicy":
        """Parse a policy from a CLI/config string.

        Args:
            value: "abort" or "warn" (case-insensitive)

        Returns:
            Matching FailurePolicy

        Raises:
            ValueError: If the value is not a known policy
        """
        normalized = value.strip().lower()
        for policy in cls:
            if policy.value == normalized:
                return policy
        valid = ", ".join(p.value for p in cls)
        raise ValueError(f"Unknown failure policy '{value}' (expected one of: {valid})")


class MutationKind(str, Enum):
    """Kind of file operation described by a MutationPrimitive."""

    CREATE = "create"
    APPEND = "append"
    INSERT_AFTER_ANCHOR = "insert_after_anchor"
    SUBSTITUTE_PATTERN = "substitute_pattern"
    REMOVE = "remove"


class HostingProvider(str, Enum):
    """Supported hosting providers, in the order the pipeline attempts them."""

    HEROKU = "heroku"
    BITBUCKET = "bitbucket"
    GITHUB = "github"

    @property
    def display_name(self) -> str:
        """Human-readable provider name."""
        return {
            HostingProvider.HEROKU: "Heroku",
            HostingProvider.BITBUCKET: "Bitbucket",
            HostingProvider.GITHUB: "GitHub",
        }[self]
