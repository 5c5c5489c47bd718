from prometheus_client import Counter, Histogram

DB_ACTION_TOTAL = Counter(
    "minicore_db_action_total",
    "Table actions dispatched, by outcome",
    ["table", "action", "status"],
)

DB_ACTION_LATENCY_SECONDS = Histogram(
    "minicore_db_action_latency_seconds",
    "Latency of table actions including the gateway round trip",
    ["table", "action"],
)
