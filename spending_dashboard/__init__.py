"""Top-level package for the Spending Dashboard.

The primary modules are:

* ``summary`` – totals, grouped breakdowns and status checks
* ``edit_state`` – per-row inline edit drafts
* ``store`` / ``storage`` – the transaction list and its JSON persistence
* ``session`` – the state holder the UI talks to
* ``visualization`` – functions that generate Plotly figures
* ``dashboard`` – a Streamlit app that ties everything together

To run the dashboard from the command line you can execute:

```bash
streamlit run spending_dashboard/dashboard.py
```
"""

from . import summary  # noqa: F401  # re-exported for convenience
from . import visualization  # noqa: F401  # re-exported for convenience
from .session import DashboardSession  # noqa: F401

__all__ = ["summary", "visualization", "DashboardSession"]
