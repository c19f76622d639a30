"""
Exception hierarchy for the subnet router setup tool.

Every failure the tool reports is a RouterSetupError subclass. The CLI
prints the message and exits with status 1. HelpRequested is not an
error: it carries the usage text out of the parser so the CLI can print
it and exit 0.
"""

from pathlib import Path
from typing import Any, Optional


class RouterSetupError(Exception):
    """Base exception for all setup errors."""

    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def __str__(self) -> str:
        if self.details:
            return f"{self.message}: {self.details}"
        return self.message


class HelpRequested(Exception):
    """Raised by the parser when --help is seen."""

    def __init__(self, usage: str):
        super().__init__("help requested")
        self.usage = usage


# =============================================================================
# Usage Errors
# =============================================================================

class UsageError(RouterSetupError):
    """Malformed command line."""
    pass


class UnknownOption(UsageError):
    """A token on the command line is not a recognized option."""

    def __init__(self, option: str):
        super().__init__(f"Unknown option {option}")
        self.option = option


class MissingOptionValue(UsageError):
    """An option that takes a value was given none."""

    def __init__(self, option: str):
        super().__init__(f"Option {option} requires a value")
        self.option = option


# =============================================================================
# Validation Errors
# =============================================================================

class ValidationError(RouterSetupError):
    """Container ID or target failed validation."""
    pass


class NonNumericContainerId(ValidationError):
    def __init__(self, value: str):
        super().__init__("Container ID must be numeric", details=repr(value))
        self.value = value


class InvalidFormat(ValidationError):
    def __init__(self, value: str):
        super().__init__(
            f"Invalid subnet format '{value}'",
            details="use CIDR notation (e.g., 192.168.1.0/24)",
        )
        self.value = value


class OctetOutOfRange(ValidationError):
    def __init__(self, value: str, octet: str):
        super().__init__(
            f"Invalid subnet format '{value}'",
            details=f"octet {octet} is outside 0-255",
        )
        self.value = value
        self.octet = octet


class PrefixOutOfRange(ValidationError):
    def __init__(self, value: str, prefix: str):
        super().__init__(
            f"Invalid subnet format '{value}'",
            details=f"prefix length /{prefix} is outside 0-32",
        )
        self.value = value
        self.prefix = prefix


class UnresolvedTarget(ValidationError):
    """No subnet was given and none could be detected."""
    pass


# =============================================================================
# Preflight Errors
# =============================================================================

class PreflightError(RouterSetupError):
    """Host or container state prevents the setup from starting."""
    pass


class NotRoot(PreflightError):
    def __init__(self):
        super().__init__("This script must be run as root")


class ContainerNotFound(PreflightError):
    def __init__(self, container_id: int):
        super().__init__(f"Container {container_id} does not exist")
        self.container_id = container_id


class CommandNotFound(RouterSetupError):
    """A required executable is not installed on the host."""

    def __init__(self, command: str):
        super().__init__(f"Command not found: {command}")
        self.command = command


class StepFailed(RouterSetupError):
    """
    A command failed partway through the setup sequence.

    backup is the LXC config backup when step 3 had already run,
    otherwise None.
    """

    def __init__(self, step: int, command: str, backup: Optional[Path] = None):
        super().__init__(f"Step {step} failed", details=command)
        self.step = step
        self.command = command
        self.backup = backup


class SetupCancelled(RouterSetupError):
    """The operator declined the confirmation prompt."""

    def __init__(self):
        super().__init__("Setup cancelled")
