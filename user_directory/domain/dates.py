"""Tagged date strings used at the display/wire boundary."""

from typing import NewType

# DD/MM/YYYY, shown in the UI and held in the cache.
DisplayDate = NewType("DisplayDate", str)

# Whatever the remote store expects: MM/DD/YYYY or ISO YYYY-MM-DD.
WireDate = NewType("WireDate", str)
