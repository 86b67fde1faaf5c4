"""
OrangeHRM leave-workflow E2E toolkit.

Provides the building blocks the browser suite under ``tests/e2e`` is
assembled from:
  * **models** -- validated value objects (employee, leave request,
    system user).
  * **selectors** -- per-feature locator maps for the OrangeHRM UI.
  * **pages** -- Page Object Model drivers, one per UI feature area.
  * **repositories** -- interchangeable leave-request data sources.
  * **state** -- the JSON side-file that carries workflow state between
    independently executed scenario modules.

Key Concepts Demonstrated:
- Page Object Model with selector maps kept out of driver logic
- Repository pattern for swapping data sources under one contract
- Explicit state hand-off between test modules
"""

from __future__ import annotations

import logging

__version__ = "1.0.0"

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
