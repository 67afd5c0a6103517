# -*- coding: utf-8 -*-
"""
Equalize the spacing of parallel pipes, ducts and conduits.
Host-independent core used by the 'Equalize Spacing' button.
"""
from mep_equalize.geometry import XYZ, Segment, PARALLEL_TOLERANCE, perpendicular_of
from mep_equalize.data_model import ErrorKind, Failure, Placement, EqualizeJob, EqualizeResult
from mep_equalize.logic import are_parallel, compute_translation, fan_out_distances, plan_placements, parse_distance
from mep_equalize.host import LinearElementHost
from mep_equalize.equalizer import Equalizer

__version__ = "1.0.0"
