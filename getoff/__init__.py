"""
Get Off - Guess the Secret Station

A hot-seat party game engine. Players ride a train along a line of
stations and take turns deciding where to get off; whoever gets off
at the secret station wins.

The package provides:
- A pure, immutable turn engine (engine_core)
- Sessions holding the latest state, key bindings and text rendering
- An HTTP API for a local game client
- A terminal CLI
"""

__version__ = "0.1.0"
