"""
Prometheus Metrics Registration.

Counters and histograms for tool runs and chain registration.
"""

from prometheus_client import Counter, Histogram

# ============================================================================
# COUNTERS
# ============================================================================

tool_runs_total = Counter(
    "tool_runs_total",
    "Total tool runs",
    ["kind", "status"],  # success, failure
)

tool_chains_registered_total = Counter(
    "tool_chains_registered_total", "Tool chains inserted into the chain registry"
)

launch_values_recorded_total = Counter(
    "launch_values_recorded_total",
    "Launch argument values propagated into tool argument history",
    ["outcome"],  # recorded, unrecognized
)

# ============================================================================
# HISTOGRAMS
# ============================================================================

tool_run_duration = Histogram(
    "tool_run_duration_seconds",
    "Tool run duration",
    ["kind"],
    buckets=(0.01, 0.05, 0.1, 0.5, 1.0, 5.0, 30.0, 120.0),
)
