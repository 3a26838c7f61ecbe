"""Console presentation for the exfs command line."""
