"""lgremote -- Remote control for a fleet of networked televisions.

Talks the HTTP+XML "ROAP" control protocol exposed by the sets: pairing,
session authentication, remote key input and 3D display state queries.
Operations can target a single named set or the whole fleet at once.
"""

__version__ = "0.1.0"
