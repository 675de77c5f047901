"""Query pipeline and debounced search sessions."""
from .pipeline import filter_catalog, group_by_category, cap_groups, run_search, status_message
from .debounce import Debouncer
from .session import SearchSession, validate_max_results
