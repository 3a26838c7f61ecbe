"""Platform dispatch and per-platform directory lookups."""
