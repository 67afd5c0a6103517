# -*- coding: utf-8 -*-
import logging

from mep_equalize.geometry import PARALLEL_TOLERANCE, perpendicular_of
from mep_equalize.data_model import ErrorKind, Failure, EqualizeJob, EqualizeResult
from mep_equalize import logic

logger = logging.getLogger(__name__)


class Equalizer(object):
    """
    Re-spaces parallel linear elements at multiples of a distance from the first one.

    All checks run before the host is asked to move anything, and the moves are
    handed to the host in a single apply call.
    """
    def __init__(self, host, tolerance=PARALLEL_TOLERANCE, up=None):
        self.host = host
        self.tolerance = tolerance
        self.up = up

    def prepare(self, element_refs):
        """Validates a selection. Returns (EqualizeJob, None) or (None, Failure)."""
        element_refs = list(element_refs or [])
        if len(element_refs) < 2:
            return None, Failure(ErrorKind.INSUFFICIENT_SELECTION,
                                 detail="{} element(s) selected.".format(len(element_refs)))

        supported = [ref for ref in element_refs if self.host.is_supported(ref)]
        skipped = len(element_refs) - len(supported)
        if skipped:
            logger.debug("Ignoring %d unsupported element(s).", skipped)
        if len(supported) < 2:
            return None, Failure(ErrorKind.UNSUPPORTED_ELEMENT_KIND,
                                 detail="{} supported element(s) selected.".format(len(supported)))

        segments = []
        for ref in supported:
            segment, failure = self.host.get_location_segment(ref)
            if failure:
                return None, failure
            if segment is None:
                return None, Failure(ErrorKind.NO_LINEAR_LOCATION, detail=self.host.describe(ref))
            segments.append(segment)

        if not logic.are_parallel(segments, self.tolerance):
            return None, Failure(ErrorKind.NOT_PARALLEL)

        try:
            perpendicular = perpendicular_of(segments[0].direction, self.up)
        except ValueError as e:
            # Elements run along the up vector: there is no plane to offset them in
            return None, Failure(ErrorKind.NOT_PARALLEL,
                                 "Selected elements run along the up axis and cannot be offset.",
                                 detail=str(e))

        return EqualizeJob(supported, segments, perpendicular), None

    def plan(self, job, distance):
        return logic.plan_placements(job.reference, job.targets, distance,
                                     perpendicular=job.perpendicular, tolerance=self.tolerance)

    def run(self, job, distance):
        """
        Places every non-reference element of `job` at index * distance.
        `distance` must already be in the host's internal units.
        """
        if not logic.is_valid_distance(distance):
            return EqualizeResult.failed(ErrorKind.INVALID_DISTANCE, detail=repr(distance))

        placements = self.plan(job, float(distance))
        for placement in placements:
            logger.debug("%r", placement)

        # The host reports its own failure; it is passed on unchanged and never retried
        failure = self.host.apply_translations(placements)
        if failure:
            return EqualizeResult(placements=placements, failure=failure)
        return EqualizeResult(placements=placements)

    def equalize(self, element_refs, distance):
        job, failure = self.prepare(element_refs)
        if failure:
            return EqualizeResult(failure=failure)
        return self.run(job, distance)
