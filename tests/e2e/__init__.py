"""End-to-end tests of the ``clibkit`` command."""
