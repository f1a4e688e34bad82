"""Root pytest configuration.

Forces the testing environment before any package reads its configuration,
so no data directories are created while the suite runs.
"""

import os

os.environ.setdefault("GESTURIO_ENV", "testing")
