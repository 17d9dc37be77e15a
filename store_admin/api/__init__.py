"""
API routers package.

WHY: One router module per resource keeps routes thin and discoverable;
main.create_app mounts them all under the configured API prefix.
"""
