"""Infrastructure Layer: Contains concrete implementations and adapters.

Connects the application to the outside world (child processes, platform
specifics, configuration sources, logging and the console) by implementing
the interfaces defined in the domain layer.
"""
