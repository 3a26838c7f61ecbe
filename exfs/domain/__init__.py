"""Domain Layer: value types, error taxonomy and the ports core services depend on."""
