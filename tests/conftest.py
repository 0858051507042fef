import logging
import pytest

@pytest.fixture(autouse=True)
def _reset_exprtree_logger():
    # main() installs a console handler; keep it from leaking between tests
    yield
    root = logging.getLogger("exprtree")
    root.handlers.clear()
    root.propagate = True
    root.setLevel(logging.NOTSET)
