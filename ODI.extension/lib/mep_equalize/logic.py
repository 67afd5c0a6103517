# -*- coding: utf-8 -*-
"""
Pure Logic Engine.
Does not import Revit API. Operates on abstract geometry (geometry.XYZ, geometry.Segment).
"""
import math

from mep_equalize.geometry import PARALLEL_TOLERANCE, perpendicular_of
from mep_equalize.data_model import ErrorKind, Failure, Placement


def are_parallel(segments, tolerance=PARALLEL_TOLERANCE):
    """
    True when every segment runs along the first one's direction or its negation.
    Fewer than two segments is never parallel: there is nothing to compare.
    """
    segments = list(segments)
    if len(segments) < 2:
        return False

    first_direction = segments[0].direction
    for segment in segments[1:]:
        direction = segment.direction
        if not first_direction.is_almost_equal_to(direction, tolerance) and \
                not first_direction.is_almost_equal_to(-direction, tolerance):
            return False
    return True


def compute_translation(reference, target, perpendicular, target_distance):
    """
    Move vector that puts the target's midpoint at
    reference midpoint + perpendicular * target_distance.
    The sign of target_distance picks the side of the reference line.
    """
    desired_mid = reference.midpoint + perpendicular * target_distance
    return desired_mid - target.midpoint


def fan_out_distances(count, base_distance):
    """
    Offsets for elements 1..count-1: element i sits at i * base_distance from
    the reference, not base_distance from its neighbour.
    """
    return [i * base_distance for i in range(1, count)]


def plan_placements(reference, targets, base_distance, perpendicular=None, up=None,
                    tolerance=PARALLEL_TOLERANCE):
    """
    Computes one Placement per (element_ref, segment) in `targets`.
    `perpendicular` defaults to perpendicular_of(reference.direction, up).
    Every translation is read from the unmoved reference and the unmoved target,
    so the order they are applied in does not matter.
    """
    if perpendicular is None:
        perpendicular = perpendicular_of(reference.direction, up)
    offsets = fan_out_distances(len(targets) + 1, base_distance)

    placements = []
    for index, ((element_ref, segment), offset) in enumerate(zip(targets, offsets), 1):
        translation = compute_translation(reference, segment, perpendicular, offset)
        placements.append(Placement(
            element_ref, index, offset, translation,
            needs_move=not translation.is_zero_length(tolerance)
        ))
    return placements


def is_valid_distance(value):
    try:
        value = float(value)
    except (TypeError, ValueError):
        return False
    return not math.isnan(value) and not math.isinf(value) and value > 0


def parse_distance(text):
    """
    Reads a user-entered distance. Returns (value, None) or (None, Failure).
    Accepts a comma decimal separator ("1,5").
    """
    if text is None:
        return None, Failure(ErrorKind.INVALID_DISTANCE, detail="No value entered.")

    cleaned = (text if hasattr(text, "strip") else str(text)).strip().replace(",", ".")
    try:
        value = float(cleaned)
    except ValueError:
        return None, Failure(ErrorKind.INVALID_DISTANCE, detail="Not a number: '{}'".format(text))

    if not is_valid_distance(value):
        return None, Failure(ErrorKind.INVALID_DISTANCE, detail="Distance must be positive: '{}'".format(text))
    return value, None
