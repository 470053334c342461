"""Error definitions for clibkit."""

# ============================================================================
#                               Base error
# ============================================================================


class ClibError(Exception):
    """Base class for all clibkit errors."""


# ============================================================================
#                           Fragment / join errors
# ============================================================================


class AllocationError(ClibError, MemoryError):
    """Raised when memory for a fragment table or joined text cannot be obtained."""

    def __init__(self, what: str) -> None:
        super().__init__(f"Could not allocate memory for {what}.")
        self.what = what


class FragmentTypeError(ClibError, TypeError):
    """Raised when a fragment or separator is not a string."""

    def __init__(self, position: int | None, value: object) -> None:
        where = "separator" if position is None else f"fragment {position}"
        super().__init__(
            f"Expected str for {where}, got {type(value).__name__}."
        )
        self.position = position
        self.value = value


# ============================================================================
#                           Environment errors
# ============================================================================


class EnvVarNotSetError(ClibError):
    """Raised when a required environment variable is unset or empty."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Environment variable {name} is not set.")
        self.name = name


class EnvVarNameError(ClibError, ValueError):
    """Raised when an environment variable name cannot be used."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Invalid environment variable name: {name!r}.")
        self.name = name


# ============================================================================
#                               File errors
# ============================================================================


class FileOperationError(ClibError):
    """Raised when a file helper fails at the operating-system level."""

    def __init__(self, operation: str, path: str, reason: str) -> None:
        super().__init__(f"Could not {operation} {path}: {reason}")
        self.operation = operation
        self.path = path
        self.reason = reason


# ============================================================================
#                              Process errors
# ============================================================================


class CommandNotFoundError(ClibError):
    """Raised when the executable of a command cannot be found."""

    def __init__(self, command: str) -> None:
        super().__init__(f"Command not found: {command}")
        self.command = command


class CommandFailedError(ClibError):
    """Raised when a command exits with a non-zero status."""

    def __init__(self, command: str, returncode: int) -> None:
        super().__init__(f"Command '{command}' exited with status {returncode}.")
        self.command = command
        self.returncode = returncode


# ============================================================================
#                           Command-line errors
# ============================================================================


class NoArgumentsError(ClibError):
    """Raised when shifting an argument off an empty argument list."""

    def __init__(self) -> None:
        super().__init__("No arguments left to shift.")
