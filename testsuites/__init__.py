"""
Test suites package.

`testsuites` stays importable so that:
  - `run_tests.py` can read framework constants
  - unit tests can import the page objects they exercise
  - IDEs resolve `testsuites.ui_testing...` imports

Credentials are never stored in this package; LambdaTest runs read them
from the environment.
"""
