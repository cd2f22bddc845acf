"""STOREFRONT test suite.

Layout
- unit/      : one module at a time; collaborators replaced by plain fakes.
- contract/  : one suite per interface, run against every adapter of it.
- e2e/       : the `storefront` command driven through Click's CliRunner.

Markers
- `unit`, `contract` and `e2e` are added by directory in `conftest.py`.
- Hypothesis tests also carry `property`; run them alone with `-m property`.
"""
