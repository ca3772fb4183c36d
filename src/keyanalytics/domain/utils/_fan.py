"""
Fan-in / fan-out helpers for weight tensor shapes.

Initialization schemes such as Xavier scale random draws by the number of
input and output connections of a weight tensor. These helpers derive both
counts from the tensor shape using the usual layout conventions:

- 2-D weights are `(out_features, in_features)`.
- N-D convolution weights are `(out_channels, in_channels, k1, k2, ...)`.
"""


def calculate_fan_in(shape: tuple[int, ...]) -> int:
    """
    Compute the fan-in value for a tensor shape.

    Parameters
    ----------
    shape:
        Shape of the weight tensor.

    Returns
    -------
    int
        The number of input connections contributing to one output unit.
    """
    return calculate_fan_in_and_fan_out(shape)[0]


def calculate_fan_in_and_fan_out(shape: tuple[int, ...]) -> tuple[int, int]:
    """
    Compute both fan-in and fan-out values for a tensor shape.

    Parameters
    ----------
    shape:
        Shape of the weight tensor.

    Returns
    -------
    tuple[int, int]
        A tuple of (fan_in, fan_out).

    Raises
    ------
    ValueError
        If any dimension is negative.
    """
    if any(int(d) < 0 for d in shape):
        raise ValueError(f"Weight shape must be non-negative, got {shape}")

    if len(shape) == 0:
        return 1, 1  # scalar
    if len(shape) == 1:
        # bias-like vector
        return int(shape[0]), int(shape[0])
    if len(shape) == 2:
        fan_out, fan_in = shape
        return int(fan_in), int(fan_out)

    receptive_field = 1
    for d in shape[2:]:
        receptive_field *= int(d)

    fan_in = int(shape[1]) * receptive_field
    fan_out = int(shape[0]) * receptive_field
    return fan_in, fan_out
