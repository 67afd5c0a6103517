# -*- coding: utf-8 -*-
import pytest

from mep_equalize.geometry import Segment
from mep_equalize.data_model import ErrorKind, Failure
from mep_equalize.host import LinearElementHost


class FakeHost(LinearElementHost):
    """
    In-memory host. Elements are keyed by name; a segment of None means the
    element has no linear location.
    """
    def __init__(self, segments, unsupported=(), fail_apply=None):
        self.segments = dict(segments)
        self.unsupported = set(unsupported)
        self.fail_apply = fail_apply
        self.apply_calls = []

    def is_supported(self, element_ref):
        return element_ref not in self.unsupported

    def get_location_segment(self, element_ref):
        segment = self.segments.get(element_ref)
        if segment is None:
            return None, Failure(ErrorKind.NO_LINEAR_LOCATION, detail=element_ref)
        return segment, None

    def apply_translations(self, placements):
        self.apply_calls.append(list(placements))
        if self.fail_apply:
            return Failure(ErrorKind.TRANSACTION_FAILURE, self.fail_apply)
        for p in placements:
            if p.needs_move:
                self.segments[p.element_ref] = self.segments[p.element_ref].translated(p.translation)
        return None


def along_x(y, z=0.0, length=10.0):
    return Segment((0.0, y, z), (length, y, z))


@pytest.fixture
def three_runs():
    return FakeHost([("a", along_x(0.0)), ("b", along_x(5.0)), ("c", along_x(9.0))])
