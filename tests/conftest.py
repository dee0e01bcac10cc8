from __future__ import annotations

import pytest

from condstyle.aliases import clear_custom_aliases


@pytest.fixture(autouse=True)
def _reset_default_aliases():
    """Keep registrations on the process-wide alias table from leaking between tests."""
    clear_custom_aliases()
    yield
    clear_custom_aliases()
