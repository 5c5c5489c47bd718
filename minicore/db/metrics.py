from ..metrics.registry import DB_ACTION_LATENCY_SECONDS, DB_ACTION_TOTAL


def observe_action(table: str, action: str, status: str, latency_s: float) -> None:
    """
    Record one Table.execute() dispatch.

    status is "success", "error" or "missing" (no action under that name).
    Latency is only observed for actions that actually ran.
    """
    DB_ACTION_TOTAL.labels(table=table, action=action, status=status).inc()
    if status != "missing":
        DB_ACTION_LATENCY_SECONDS.labels(table=table, action=action).observe(latency_s)
