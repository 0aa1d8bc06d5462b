"""Runtime services shared by the list engine (telemetry)."""
