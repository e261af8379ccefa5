# graphseg

Graph-based image segmentation with two approaches:

- **Felzenszwalb–Huttenlocher merging.** The image is optionally smoothed
  with a Gaussian, turned into an 8-connected pixel graph weighted by
  absolute intensity difference, and regions are merged greedily in order
  of edge weight. A final pass absorbs regions smaller than a minimum size.
  Colour images are segmented per channel (R, G, B), the three
  segmentations are intersected and each resulting region is painted a
  random colour.
- **Seeded image foresting transform (IFT).** Given seed pixels carrying
  labels, every pixel receives the label of the seed reachable along the
  4-connected path whose largest step cost is smallest. For grayscale the
  step cost is the absolute intensity difference; for colour it is the
  squared Euclidean distance between the two pixels' colour triplets.
  Pixels that no seed reaches keep label 0.

## Installation

```
pip install .
```

Install with the test extra to run the test suite:

```
pip install .[test]
pytest
```

## Command line

The package installs a `graphseg` command with two subcommands. Each reads
an input image, segments it and writes the result to the output path (the
format follows the output file's extension).

```
graphseg graph INPUT OUTPUT [--color] [--sigma 0.8] [-k 300] [--min-size 50]
graphseg ift INPUT OUTPUT [--color] [--seed X,Y ...] [--random-seed 12345]
```

- `graph` runs the Felzenszwalb–Huttenlocher segmentation. Without
  `--color` the image is read as grayscale and the output is a grayscale
  image whose region labels are stretched onto 0..255. With `--color` the
  image is read as RGB and the output shows each region in a random colour.
- `ift` runs the seeded foresting transform. Give `--seed X,Y` once per
  region; seeds are labelled 100, 200, 300, … in the order given, and each
  one is printed as it is added. Without `--color` the output is the label
  image (labels taken modulo 256) as 8-bit grayscale. With `--color` RGB
  distances are used and each label is painted a random colour from a
  generator seeded with `--random-seed`.

The command exits with status 1, printing a message to standard error, when
the input cannot be read, a seed lies outside the image, or the output
cannot be written.

See all options with:

```
graphseg --help
```

## Library use

Felzenszwalb segmentation of a grayscale array (the defaults are
`sigma=0.8`, `k=300`, `min_size=50`):

```python
import numpy as np
from PIL import Image

from graphseg.felzenszwalb import scale_labels, segment_grayscale

gray = np.asarray(Image.open("photo.png").convert("L"))
labels = segment_grayscale(gray, 0.8, 300.0, 50)   # consecutive labels 0..n-1
Image.fromarray(scale_labels(labels)).save("segmented.png")
```

Colour segmentation of an `(h, w, 3)` array gives each region a random
colour drawn from the `random.Random` you pass in (a fresh unseeded one if
you pass none):

```python
import random
from graphseg.felzenszwalb import segment_color

vis = segment_color(rgb_image, 0.8, 300.0, 50, random.Random(0))
```

Lower-level pieces in `graphseg.felzenszwalb`: `segment_channel` (per-pixel
component representatives for one channel), `relabel`,
`intersect_segmentations` and `colorize`.

Seeded segmentation with the image foresting transform; a 2-D image uses
`gray_cost`, an `(h, w, 3)` image `color_cost`:

```python
from graphseg.ift import color_labels, ift_segmentation, make_seeds

seeds = make_seeds([(10, 12), (80, 40)], 100, 100)  # (x, y) points; labels 100, 200
labels = ift_segmentation(gray, seeds)
vis = color_labels(labels)  # random colours, reproducible by default
```

Seeds can also be built directly as `graphseg.ift.Seed(x, y, label)`.

The building blocks are available on their own as well:
`graphseg.disjoint_set.DisjointSet` (union-find that tracks component size
and internal difference), and `graphseg.graph.Edge`, `gaussian_kernel`,
`gaussian_blur` and `grid_edges`.

## What it does not do

There is no interactive window for picking IFT seeds by clicking on the
image, and nothing is displayed on screen: seeds are given as coordinates
(`--seed X,Y` or `make_seeds`), and results are written to files or
returned as arrays.