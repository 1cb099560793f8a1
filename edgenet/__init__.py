"""Edge detection on thresholded images with classic operators, a trainable perceptron and a fixed network."""

__version__ = "0.1.0"
__all__ = ["__version__"]