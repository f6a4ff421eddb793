import logging

import pytest


@pytest.fixture(autouse=True)
def _reset_aclx_loggers():
    """Keep per-test logger tweaks from leaking between tests."""
    names = ["aclx", "aclx.core.acl", "aclx.audit"]
    saved = {n: logging.getLogger(n).level for n in names}
    yield
    for n, level in saved.items():
        logging.getLogger(n).setLevel(level)
