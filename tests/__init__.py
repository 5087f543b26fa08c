"""ALMANAC test suite.

Folder taxonomy
- unit/         : Isolated, fast checks of a single module/class/function.
- contract/     : Shared behavior/invariants enforced across every timezone rule provider.
- e2e/          : The ``almanac`` command line driven through Click's CliRunner.

General guidance
- Keep unit fast and deterministic; prefer the in-memory rule provider over the
  system timezone database unless the test is about that database.
- Contract parametrizes implementations to ensure consistent behavior.
- Property-based tests live with the layer they exercise and use @pytest.mark.property.
"""
