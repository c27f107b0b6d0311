"""The ``test`` command.

Running an exercise's test suite is not implemented.  ``run_tests`` is kept
as an explicit no-op so the ``test`` command stays part of the CLI.
"""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def run_tests(root: str | Path, identifier: str) -> None:
    """Run the tests of an exercise.  Currently always succeeds.

    Neither *root* nor *identifier* is inspected.  Failures would be
    reported as ``TestingError``.
    """
    logger.debug("Test run requested for %s under %s; nothing to do", identifier, root)
