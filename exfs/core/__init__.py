"""Core Application Layer: Orchestrates use cases and application logic.

Holds the editor and locator services, the FileSystem facade that composes
them with a process runner, and the command handler used by the CLI.
"""
