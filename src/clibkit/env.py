"""Environment variable helpers.

Thin wrappers over ``os.environ`` that turn missing values and unusable names
into `clibkit.errors` exceptions.
"""

import logging
import os

from clibkit.errors import EnvVarNameError, EnvVarNotSetError

logger = logging.getLogger(__name__)


def _validate_name(name: str) -> None:
    if not name or "=" in name or "\x00" in name:
        raise EnvVarNameError(name)


def get_env(name: str) -> str:
    """Get the value of an environment variable.

    Args:
        name: Variable name.

    Returns:
        The variable's value.

    Raises:
        EnvVarNotSetError: If the variable is unset or empty.
    """
    if not (value := os.environ.get(name)):
        raise EnvVarNotSetError(name)
    return value


def get_env_or(name: str, default: str) -> str:
    """Get an environment variable, falling back to ``default`` when unset or empty."""
    return os.environ.get(name) or default


def set_env(name: str, value: str, overwrite: bool = True) -> None:
    """Set an environment variable for this process and its children.

    Args:
        name: Variable name; must be non-empty and must not contain ``=``.
        value: New value.
        overwrite: When False, an existing value is left untouched.

    Raises:
        EnvVarNameError: If ``name`` cannot be used as a variable name.
    """
    _validate_name(name)
    if not overwrite and name in os.environ:
        logger.debug("Keeping existing value of %s", name)
        return
    os.environ[name] = value
    logger.debug("Set %s", name)


def unset_env(name: str) -> None:
    """Remove an environment variable; a variable that is already absent is fine.

    Raises:
        EnvVarNameError: If ``name`` cannot be used as a variable name.
    """
    _validate_name(name)
    os.environ.pop(name, None)
    logger.debug("Unset %s", name)
