"""
Adapter implementations for the Flight Planner.

Adapters are concrete implementations of the port interfaces.
They handle the specifics of data sources, storage and algorithms.
"""
