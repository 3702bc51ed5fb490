"""Shared fixtures for core unit tests"""

import pytest

from mdblocks.core.classify import parse_text


SAMPLE_MD = """\
# Findings

The results were **significant** overall.

| Metric | Value |
|--------|-------|
| **Recall** | 0.91 |
| Precision | 0.87 |

- first point
- second <point>

## Next Steps
Follow up next week.
"""


@pytest.fixture(name="sample_blocks")
def sample_blocks_fixture():
    return parse_text(SAMPLE_MD)
