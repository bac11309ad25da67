# conceptspace

`conceptspace` represents knowledge geometrically:

- a **point** is one concept,
- a **convex region** is a category,
- a **quality dimension** is one aspect along which concepts are measured,
- **distance** measures how similar two concepts are.

It is a library; it has no runtime dependencies beyond the standard library
and installs no commands.

## Installation

```
pip install .
```

With the test dependencies:

```
pip install ".[test]"
```

## Building a space

```python
from conceptspace.point import ConceptualPoint
from conceptspace.space import ConceptualMetric, ConceptualSpace
from conceptspace.region import ConvexRegion, Hyperplane

metric = ConceptualMetric.uniform(2, 2.0)          # Euclidean, unit weights
space = ConceptualSpace("colours", [], metric)

a = ConceptualPoint([1.0, 2.0])
b = ConceptualPoint([3.0, 4.0])
space.add_point(a)
space.add_point(b)

# [(id, distance), ...], nearest first
print(space.k_nearest_neighbors(ConceptualPoint([1.5, 2.5]), 1))

region = ConvexRegion.from_prototype(a).with_name("warm")
region.boundaries.append(Hyperplane([1.0, 0.0], 0.0))   # x >= 0
space.add_region(region)
print(space.find_containing_regions(b))
```

`ConceptualPoint` (in `conceptspace.point`) holds coordinates, an optional
map from dimension id to coordinate index, and an id (a fresh UUID unless
given). It offers `get_dimension_value`, `weighted_distance` (weighted
Minkowski distance of order `p`), `dot` and `norm`. `Concept` in
`conceptspace.concept` is the same idea with an optional `name` and
`description`, set through `with_name` and `with_description`, which return
copies.

`ConceptualMetric` is a weighted Minkowski metric: `uniform`, `get_weights`,
`distance` and `open_ball`, whose `OpenBall.contains` tests strict
inclusion. `ConceptualSpace` stores points and regions and offers
`add_point`, `add_region` (which raises `InvalidDimensionError` if the
region is not convex over those of its member points that are stored in the
space), `find_containing_regions`, `k_nearest_neighbors`, `voronoi_cell` and
`verify_metric_axioms`.

`ConvexRegion` (in `conceptspace.region`) is bounded by `Hyperplane`s; a
point is inside when it lies on the non-negative side of every boundary. It
also has `update_prototype` (moves the prototype to the centroid),
`is_convex`, `add_member`, `remove_member` and `member_count`.

## Dimensions and weights

`QualityDimension` (in `conceptspace.quality`) is built with `continuous`,
`categorical`, `ordinal` or `circular`. The range is half-open,
`[start, end)`; circular dimensions span 0 to 360 degrees and accept any
value. Each dimension can `validate_value`, `normalize_value` and
`denormalize_value`.

`conceptspace.weights` provides three kinds of dimension weight, made by
functions of the same names:

- `constant(weight)`: the same weight in every context,
- `contextual(base_weight)`: per-context overrides added through `with_context`, which returns a new weight,
- `attentional(current, min_weight, max_weight)`: a weight held within a range, moved through `update_attention`.

## Similarity

`SimilarityEngine` (in `conceptspace.similarity`) takes a base metric:
anything with a `distance(a, b)` method, such as `ConceptualMetric`, or a
plain `(a, b) -> float` callable. It offers:

- `basic_similarity`: `1 / (1 + distance)`,
- `contextual_similarity`: the same with weights registered through `add_context_weights`,
- `semantic_similarity`: cosine similarity mapped onto `[0, 1]`, or a learned value when one is cached,
- `adaptive_similarity`: moves the similarity a tenth of the way towards a feedback score and caches the result,
- `clear_cache` and `cache_stats`.

The module also provides `category_based_similarity`,
`prototype_similarity`, `salience_weighted_similarity`,
`feature_similarity`, `temporal_similarity` (dynamic time warping over two
trajectories) and `multi_level_similarity`.

## Spatial indexes

`RTreeIndex` and `KdTreeIndex` (in `conceptspace.spatial_index`) implement
`SpatialIndex`: `insert`, `remove`, `k_nearest_neighbors`, `range_search`,
`clear` and `len()`. Both take a metric in the same forms as
`SimilarityEngine`.

- `RTreeIndex` scans every point; its neighbours come nearest first.
- `KdTreeIndex` can be filled with `build_from_points` or `insert`. It does
  not support removal: `remove` always returns `False`. Its
  `k_nearest_neighbors` returns results farthest first.

## Morphisms, projections and criteria

- `conceptspace.morphisms`: `MorphismType` (a `MorphismKind` plus role names), `CrossContextMorphism` (with `connects_contexts`, `involves_concept`, `inverse`), `MorphismDiscoveryRule` and `MorphismCollection` with its `find_*` queries.
- `conceptspace.projection`: the changes `AddConcept`, `RemoveConcept`, `AddToRegion` and `RemoveFromRegion`; the `ConceptualProjection` interface; the `Transformation` classes (identity, linear, logarithmic, sigmoid, custom); `ProjectionContextBuilder`; and `ExampleDomainEvent`, which projects into a remove followed by an add of a fresh concept.
- `conceptspace.criteria`: `QualityCriteria` checks a mapping of qualities, or an object with a `qualities` mapping, against required, minimum, maximum and must-have conditions.

## Errors

All errors derive from `ConceptualError` (in `conceptspace.errors`):
`InvalidDimensionError`, `InvalidPointError`, `InvalidMorphismError` and
`ProjectionError`.

## What the package does not do

- It keeps everything in memory; it does not store or load spaces or concepts.
- It has no command or event handling around spaces.
- It does not detect categories or category boundaries from a point cloud; regions are defined by their hyperplanes.
- `MorphismDiscoveryRule` describes which contexts a rule applies to, but nothing in the package discovers morphisms.

## Running the tests

```
pytest
```