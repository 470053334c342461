"""The ``clibkit`` command-line interface."""
