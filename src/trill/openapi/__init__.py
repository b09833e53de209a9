"""OpenAPI generation: route tree to Paths document.

``PathsGenerator`` does the walking and merging; ``generate_path_item``
builds each route's operation; ``serialize`` writes the result out.
"""
