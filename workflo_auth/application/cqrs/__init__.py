"""CQRS plumbing: response shapes and the message bus.

Import from the submodules (``response_shape``, ``message_bus``).
"""
