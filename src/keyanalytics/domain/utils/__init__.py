from ._fan import calculate_fan_in, calculate_fan_in_and_fan_out

__all__ = [
    calculate_fan_in.__name__,
    calculate_fan_in_and_fan_out.__name__,
]
