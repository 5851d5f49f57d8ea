"""Target size computation."""

from ..common.schemas import TargetDimensions


def compute_target_dimensions(
    *,
    source_width: int,
    source_height: int,
    width: int = 0,
    height: int = 0,
) -> TargetDimensions:
    """
    Resolve the requested width/height against the source size.

    A requested value of 0 (or less) means auto. When only one side is
    given the other keeps the source aspect ratio, computed as an integer
    percentage first and truncated at each division:

        new_width = source_width * (height * 100 // source_height) // 100

    When nothing is requested the result is 0x0.
    """
    if width > 0 and height > 0:
        return TargetDimensions(width=width, height=height)
    elif height > 0:
        new_width = source_width * (height * 100 // source_height) // 100
        return TargetDimensions(width=new_width, height=height)
    elif width > 0:
        new_height = source_height * (width * 100 // source_width) // 100
        return TargetDimensions(width=width, height=new_height)
    else:
        return TargetDimensions(width=0, height=0)
