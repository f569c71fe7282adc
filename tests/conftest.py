from __future__ import annotations

import os

import pytest

from ovaldef import parser


class Helpers:
    def __init__(self, request, tmpdir):
        # current information about the running test
        # docs: https://docs.pytest.org/en/6.2.x/reference.html#std-fixture-request
        self.request = request
        self.tmpdir = tmpdir

    def local_dir(self, path: str):
        """
        Returns the path of a file relative to the current test file.

        Given the following setup:

            tests/unit/
            ├── test-fixtures
            │   ├── simple.xml
            │   └── dangling.xml
            └── test_parser.py

        The call `local_dir("test-fixtures/simple.xml")` will return the absolute path to
        the fixture relative to test_parser.py
        """
        current_test_filepath = os.path.realpath(self.request.module.__file__)
        parent = os.path.realpath(os.path.dirname(current_test_filepath))
        return os.path.join(parent, path)

    def load_document(self, name: str):
        """
        Parse a fixture from the test-fixtures directory beside the current test file
        """
        return parser.parse_file(self.local_dir(os.path.join("test-fixtures", name)))


@pytest.fixture
def helpers(request, tmpdir):
    """
    Returns a common set of helper functions for tests.
    """
    return Helpers(request, tmpdir)
