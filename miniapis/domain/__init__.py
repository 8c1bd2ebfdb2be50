"""Pure domain rules (validation, ordering, summaries) with no I/O."""
