"""Platform services: filesystem primitives and logging."""
