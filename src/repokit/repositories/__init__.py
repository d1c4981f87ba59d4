"""Repository layer: query facade over SQLAlchemy plus result projections.

Repositories are the only place that builds queries. Services receive either
raw mapped records or BaseResult projections, never a live Query.
"""
