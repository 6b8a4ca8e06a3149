"""HEXCALC test suite.

Folder taxonomy
- unit/         : One module/class/function at a time; fakes at the ports.
- contract/     : Port behavior asserted once, run against every adapter.
- integration/  : Adapters against a real (SQLite) database and Alembic.
- functional/   : User-visible CLI flows (help, db onboarding).
- e2e/          : Full CLI runs: calculator commands and logging options.
- fixtures/     : Shared pytest fixtures and hypothesis strategies.
- helpers/      : Shared assertion helpers (no tests here).

Every test is marked after its folder (see conftest.py); hypothesis tests
additionally carry @pytest.mark.property.
"""
