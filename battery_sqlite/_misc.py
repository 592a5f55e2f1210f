import math
import os
from typing import Annotated, Any, Union, get_args, get_origin


def get_unique_filename(filename: str) -> str:
    """
    Generate a unique filename by appending a counter if the file already exists.

    Args:
        filename (str): The desired filename.

    Returns:
        str: A unique filename, e.g. 'store_snapshot(2).db' if 'store_snapshot.db'
            and 'store_snapshot(1).db' already exist.
    """
    name, ext = os.path.splitext(filename)
    counter = 1
    unique_filename = filename
    while os.path.exists(unique_filename):
        unique_filename = f"{name}({counter}){ext}"
        counter += 1
    return unique_filename


def column_type(annotation: Any) -> type:
    """
    Map the annotation of a model field onto the python type sqlite-utils uses for the column.

    Optional and annotated fields are unwrapped, so `Optional[float]` becomes `float`.

    Args:
        annotation (Any): The annotation of a pydantic field.

    Returns:
        type: One of int, float or str.
    """
    if get_origin(annotation) is Union:
        args = [arg for arg in get_args(annotation) if arg is not type(None)]
        annotation = args[0]
    if get_origin(annotation) is Annotated:
        annotation = get_args(annotation)[0]
    if annotation in (int, float, str):
        return annotation
    return str


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))
