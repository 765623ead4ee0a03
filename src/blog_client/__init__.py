"""Client for a microservice-backed blog.

The package is split into a service client that talks to the user, post and
comment services, a set of state containers, and the ``BlogApp`` orchestrator
that wires user actions to both.
"""

__version__ = "0.1.0"
