"""
Application package for the Habit Tracker API.

The code is split into ``core`` (configuration, logging, errors),
``services`` (the in-memory habit store), ``schemas`` (request and
response models) and ``api`` (versioned routers).  ``main`` wires them
together.
"""
