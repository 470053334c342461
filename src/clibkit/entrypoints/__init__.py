"""Entrypoints for clibkit.

Expose the library to the outside world through the ``clibkit`` command.
Commands parse their inputs, call the library helpers, and present results;
they hold no logic of their own.
"""
