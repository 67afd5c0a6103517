# -*- coding: utf-8 -*-
"""
Equalize Spacing Tool

Select two or more parallel pipes, ducts or conduits. The first picked element
is the reference and stays put; element N is moved so its midpoint sits at
N x distance from the reference, perpendicular to the run in plan.
"""
__title__ = 'Equalize\nSpacing'
__context__ = "active-view-type: FloorPlan,CeilingPlan,EngineeringPlan,Section,Elevation,ThreeD"

import os

from Autodesk.Revit.Exceptions import OperationCanceledException
from pyrevit import forms, revit, script

from mep_equalize import Equalizer, parse_distance
from mep_equalize.geometry import XYZ
from mep_equalize.settings import SETTINGS_FILENAME, load_settings, save_settings

import revit_service

doc = revit.doc
uidoc = revit.uidoc
logger = script.get_logger()

SETTINGS_FILE = os.path.join(os.path.dirname(__file__), SETTINGS_FILENAME)
TITLE = "Equalize Spacing"


# --- REPORT ---
class BatchLogger(object):
    """Accumulates messages to display in a single output window."""
    def __init__(self):
        self._errors = []
        self._lines = []

    def section(self, title):
        self._lines.append("\n### {}".format(title))

    def item(self, key, value):
        self._lines.append("- **{}:** {}".format(key, value))

    def vector(self, key, v):
        self._lines.append("- **{}:** <{:.4f}, {:.4f}, {:.4f}>".format(key, v.x, v.y, v.z))

    def error(self, msg, detail=None):
        self._errors.append(str(msg))
        if detail:
            self._errors.append("Details: " + str(detail))

    def show(self):
        out = script.get_output()
        out.close_others()
        for line in self._lines:
            out.print_md(line)
        if self._errors:
            out.print_html('<strong>--- ERRORS ---</strong>')
            for e in self._errors:
                out.print_html('<div style="color:red;">{}</div>'.format(e))


def fail(report, failure):
    logger.debug("Equalize failed: %r", failure)
    report.error(failure.message, failure.detail)
    report.show()
    forms.alert(failure.message, title=TITLE)


def ask_distance(settings):
    return forms.ask_for_string(
        default=settings["distance"],
        prompt="Enter the distance between elements (in {}):".format(settings["units"].lower()),
        title="Distance Input"
    )


# --- MAIN ---

def main():
    settings = load_settings(SETTINGS_FILE)
    service = revit_service.RevitService(doc, uidoc)
    up = XYZ.BASIS_Z if settings["use_up_vector"] else None
    equalizer = Equalizer(service, tolerance=settings["tolerance"], up=up)

    report = BatchLogger()
    report.section("Selection")

    # 1. Pick elements, reference first
    try:
        element_ids = service.pick_elements("Select two or more pipes, ducts, or conduits")
    except OperationCanceledException:
        return

    job, failure = equalizer.prepare(element_ids)
    if failure:
        fail(report, failure)
        return

    report.item("Reference", service.describe(job.reference_ref))
    report.item("Elements", len(job))
    report.vector("Offset Direction", job.perpendicular)

    # 2. Distance
    text = ask_distance(settings)
    if text is None:
        return
    distance, failure = parse_distance(text)
    if failure:
        fail(report, failure)
        return

    try:
        internal_distance = service.to_internal_units(distance, settings["units"])
    except AttributeError:
        logger.error("Unknown unit '{}' in {}".format(settings["units"], SETTINGS_FILE))
        forms.alert("Unknown distance unit '{}'.".format(settings["units"]), title=TITLE)
        return
    report.item("Distance", "{} {} ({:.4f} ft)".format(distance, settings["units"], internal_distance))

    # 3. Move
    result = equalizer.run(job, internal_distance)

    report.section("Placements")
    for placement in result.placements:
        report.item("#{} {}".format(placement.index, service.describe(placement.element_ref)),
                    "offset {:.4f} ft{}".format(placement.offset, "" if placement.needs_move else " (already in place)"))
        report.vector("Move", placement.translation)

    if not result.ok:
        fail(report, result.failure)
        return

    settings["distance"] = text.strip()
    save_settings(SETTINGS_FILE, settings)

    report.section("Result")
    report.item("Moved", result.moved_count)
    report.show()
    forms.alert("Distances between elements have been equalized.", title="Success")


if __name__ == '__main__':
    main()
