"""Shared fixtures for core unit tests"""

import pytest


SAMPLE_OUTLINE = """\
Intro before any header.

# Project
  Some notes about it.
  - first
      - nested, jumped far right
        wrapped text of nested
  - second
    - [ ] open task
    - [X] done task

    ## Details
        ```
        def f():
            return 1
        ```
# Other
* star bullet
"""


@pytest.fixture(name="sample_text")
def sample_text_fixture():
    return SAMPLE_OUTLINE

