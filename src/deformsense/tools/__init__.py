"""Developer tooling: opt-in timing instrumentation for the engine tick."""
