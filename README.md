# edgenet

Edge detection on black-and-white images. An input image is converted to
grey (`0.299 R + 0.587 G + 0.114 B`, truncated) and thresholded at a chosen
level: pixels darker than the level become 255, the rest become 0. The
resulting binary image is then passed through one of several edge detectors.
The classic operators and the perceptron mark edge pixels with 0 and all
other processed pixels with 255.

Available algorithms (`edgenet.detectors.Algorithm`):

| name         | method                                                        |
|--------------|---------------------------------------------------------------|
| `if`         | compares each pixel with its lower-right neighbour            |
| `doubleif`   | compares both diagonals of a 2x2 block                        |
| `roberts`    | Roberts cross, Euclidean magnitude                            |
| `roberts2`   | Roberts cross, sum of absolute gradients                      |
| `sobel`      | Sobel operator, Euclidean magnitude                           |
| `sobel2`     | Sobel operator, sum of absolute gradients                     |
| `prewitt`    | Prewitt operator                                              |
| `perceptron` | a trained single perceptron over the 3x3 neighbourhood        |
| `net`        | a built-in 9/10/1 network; pixels it scores above 0.5 get 255 |

The detectors scan `(width - 1) * (height - 1)` flat positions; neighbours
that fall outside the image read as 0, and positions that are not scanned
stay 0 in the result.

## Installation

```
pip install .
```

## Training the perceptron

The `perceptron` algorithm needs a `weights.net` file in the current
directory. Create it by training on a pair of images of the same size: an
input image and the edge image you expect for it.

```
edgenet-train input.png expected_edges.png 127
```

Training starts from all-zero weights, runs for at most 100 epochs and stops
early once an epoch makes no mistakes; one dot is printed per epoch. The ten
weights (a bias and one per neighbourhood pixel) are written to
`weights.net`, one per line with four decimals. Images of different sizes
are rejected with "Images not corresponding".

## Detecting edges

```
edgenet-detect sobel photo.png edges.bmp
edgenet-detect perceptron photo.png edges.bmp 100
```

The arguments are the algorithm, the input image, the output image and an
optional threshold level (default 127). The result is written as a BMP file,
whatever the output name, and the processor time taken by the algorithm is
printed. `weights.net` must exist in the current directory before any
algorithm is run; without it the command prints a reminder to train first
and stops. An unknown algorithm name is reported and nothing is written.

## Using the library

```python
from edgenet.imaging import load_binary_image, save_image
from edgenet.detectors import Algorithm, detect, edge_sobel
from edgenet.perceptron import load_weights

image = load_binary_image("photo.png", 127)
edges = edge_sobel(image, False)
save_image("edges.bmp", edges)

perceptron = load_weights("weights.net")
edges = detect(Algorithm("perceptron"), image, perceptron, 127)
```

`BinaryImage` holds `width`, `height` and row-major `pixels`;
`BinaryImage.get(index)` returns 0 for indices outside the image.

Training from code:

```python
import random
from edgenet.imaging import load_binary_image
from edgenet.perceptron import random_perceptron, save_weights, train

image_in = load_binary_image("input.png", 127)
image_out = load_binary_image("expected_edges.png", 127)
start = random_perceptron(random.Random())
result = train(image_in, image_out, 127, start, 100)
print(result.epochs, result.converged)
save_weights(result.perceptron, "weights.net")
```

`train` works on a copy of the perceptron it is given; the trained weights
are in `result.perceptron`. `random_perceptron` draws small non-negative
weights in multiples of 0.04.

The built-in network can also be evaluated on its own with
`edgenet.network.eval_net`, which takes nine values and returns the
network's output between 0 and 1.

## Limitations

- Results are only written as BMP; input images may be any format Pillow
  reads.
- Only the perceptron can be trained. The weights of the `net` network are
  fixed and cannot be changed or retrained.
- Detectors work on thresholded images only; there is no grey-level or
  colour edge detection.