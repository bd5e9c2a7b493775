"""Vector arithmetic, geometry, distances and coordinate conversions."""