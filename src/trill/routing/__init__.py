"""Routing: the route tree trill reads OpenAPI paths from.

Nodes are tagged with selectors and built once during setup; the paths
generator walks them read-only.
"""
