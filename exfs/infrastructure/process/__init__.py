"""Process Runner Implementations.

Spawns external commands through the standard library subprocess module,
implementing the ProcessRunner interface from the domain layer.
"""
