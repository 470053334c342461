"""clibkit test suite.

Folder taxonomy
- unit/         : Isolated, fast checks of a single module/class/function.
- integration/  : Real interactions with the filesystem and child processes.
- e2e/          : The ``clibkit`` command invoked through Click's test runner.

Property-based tests live with the layer they exercise and use @pytest.mark.property.
"""
