import os
from typing import Optional

MSGVERSIONS_ERROR_ANNOTATIONS = os.environ.get("MSGVERSIONS_ERROR_ANNOTATIONS", "1") == "1"

# one of "error", "none" or unset; validated when applied (see msgversions.warnings)
MSGVERSIONS_WARNINGS: Optional[str] = os.environ.get("MSGVERSIONS_WARNINGS") or None
