# fotonray

Building blocks for a photon-mapping renderer in plain Python, with no
dependencies beyond the standard library:

- 3D points and directions with the usual vector algebra,
- RGB colour triples,
- affine transformations and changes of basis,
- rays and the mapping of camera-local rays into global coordinates,
- textures read from binary PPM (P6) files,
- uniform sphere and cosine-weighted hemisphere direction sampling,
- density-estimation kernels for weighting photon flux,
- tone-mapping operators,
- spherical planets with a launch station, for checking rocket connections
  between planets and ray/sphere intersections.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

- `fotonray.vector`: `Vec3`, `Point` and `Direction` (immutable triples;
  a point minus a point gives a direction, a point plus a direction gives a
  point), with `dot`, `norm`, `cross`, `normalize` and `orthonormal_basis`.
  Also holds the tolerance constants such as `EPSILON` and `DEG_TO_RAD`.
- `fotonray.transformations`: `translate`, `scale`, `rotate_x`, `rotate_y`,
  `rotate_z` (angles in degrees) and `change_basis`. They work in homogeneous
  coordinates, so translation moves a `Point` and leaves a `Direction`
  unchanged.
- `fotonray.rgb`: the `RGB` colour triple, with component-wise arithmetic,
  `RGB.from_sequence`, `norm`, `max` and `is_zero`. Dividing by zero raises
  `ValueError`.
- `fotonray.tonemapping`: `clamp`, `equalize`, `clamp_and_equalize`,
  `gamma`, `gamma_and_clamp` (gamma 2.2) and `reinhard`. Each takes an
  iterable of floats and returns a new list.
- `fotonray.kernels`: `photon_distance`, `constant_kernel`,
  `gaussian_kernel`, `conic_kernel`, `epanechnikov_kernel`,
  `biweight_kernel`, `logistic_kernel` and `max_radius`. A radius that is
  not positive raises `ValueError`.
- `fotonray.sampling`: `spherical_to_cartesian`,
  `sample_hemisphere_angles`, `sample_hemisphere_direction` (which also
  returns the probability density cos(θ)/π), `sample_sphere_angles` and
  `sample_sphere_direction`.
- `fotonray.texture`: `Texture`, loaded with `Texture.from_ppm`; `sample(u, v)`
  returns a colour in [0, 1] and wraps around the edges, and `pixels()`
  yields the raw (r, g, b) samples.
- `fotonray.ray`: `Ray` (a direction and an origin) and
  `globalize_and_normalize`.
- `fotonray.planet`: `Planet`, `interplanetary_connection` and
  `ray_sphere_intersection`. A planet's axis must be twice its radius, or
  `ValueError` is raised.

## Example

```python
import random

from fotonray.planet import Planet, ray_sphere_intersection
from fotonray.sampling import sample_sphere_direction
from fotonray.tonemapping import clamp, gamma
from fotonray.vector import Direction, Point

planet = Planet(Point(0, 0, 0), Direction(0, 0, 2), Point(1, 0, 0), 90, 0)
hit = ray_sphere_intersection(Point(-5, 0, 0), Direction(1, 0, 0), planet)
print(hit)  # [-1, 0, 0]

rng = random.Random(42)
print(sample_sphere_direction(rng))

print(clamp([0.5, 2.0]))       # [0.5, 1.0]
print(gamma([0.0, 4.0], 4.0))  # [0.0, 1.0]
```

Everything that draws random numbers takes an optional `rng` argument (a
`random.Random`), so results can be reproduced by seeding it.

## What this package does not do

This package holds the pieces, not a renderer. It has no scene primitives
such as planes or triangles, no reflection or refraction of rays, no photon
map or photon tracing, no camera, and it writes no images. It has no
command-line program.