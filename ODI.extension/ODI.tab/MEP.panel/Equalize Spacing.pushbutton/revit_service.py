# -*- coding: utf-8 -*-
from Autodesk.Revit.DB import (
    BuiltInCategory, ElementTransformUtils, Line, LocationCurve, Transaction, TransactionStatus,
    UnitTypeId, UnitUtils, XYZ
)
from Autodesk.Revit.DB.Plumbing import Pipe
from Autodesk.Revit.DB.Mechanical import Duct
from Autodesk.Revit.DB.Electrical import Conduit
from Autodesk.Revit.UI.Selection import ObjectType, ISelectionFilter

from mep_equalize import geometry
from mep_equalize.data_model import ErrorKind, Failure
from mep_equalize.host import LinearElementHost, apply_in_transaction

TRANSACTION_NAME = "Equalize MEP Distances"

ALLOWED_CATEGORIES = [
    int(BuiltInCategory.OST_PipeCurves),
    int(BuiltInCategory.OST_DuctCurves),
    int(BuiltInCategory.OST_Conduit),
]


def get_id_val(obj):
    """Safe retrieval of ElementId integer value for Revit 2024+ compatibility."""
    if hasattr(obj, "Id"):
        obj = obj.Id
    if hasattr(obj, "Value"): return obj.Value  # Revit 2024+
    if hasattr(obj, "IntegerValue"): return obj.IntegerValue  # Revit <2024
    return -1


def is_mep_curve(elem):
    if elem is None:
        return False
    if isinstance(elem, (Pipe, Duct, Conduit)):
        return True
    if not elem.Category:
        return False
    return get_id_val(elem.Category.Id) in ALLOWED_CATEGORIES


class MEPCurveSelectionFilter(ISelectionFilter):
    """Pipes, ducts and conduits only."""
    def AllowElement(self, elem):
        return is_mep_curve(elem)

    def AllowReference(self, ref, pt): return False


def to_xyz(point):
    return geometry.XYZ(point.X, point.Y, point.Z)


def to_revit_xyz(vector):
    return XYZ(vector.x, vector.y, vector.z)


class RevitService(LinearElementHost):
    """Revit side of the Equalizer. Element refs are ElementIds."""

    def __init__(self, doc, uidoc):
        self.doc = doc
        self.uidoc = uidoc

    def pick_elements(self, prompt):
        """Ordered ElementIds, in pick order. Raises OperationCanceledException on Esc."""
        refs = self.uidoc.Selection.PickObjects(ObjectType.Element, MEPCurveSelectionFilter(), prompt)
        return [r.ElementId for r in refs]

    def describe(self, element_ref):
        el = self.doc.GetElement(element_ref)
        if el is None:
            return "[{}]".format(get_id_val(element_ref))
        name = el.Category.Name if el.Category else el.GetType().Name
        return "{} [{}]".format(name, get_id_val(element_ref))

    def is_supported(self, element_ref):
        return is_mep_curve(self.doc.GetElement(element_ref))

    def get_location_segment(self, element_ref):
        el = self.doc.GetElement(element_ref)
        location = el.Location if el else None
        if not isinstance(location, LocationCurve) or not isinstance(location.Curve, Line):
            return None, Failure(ErrorKind.NO_LINEAR_LOCATION, detail=self.describe(element_ref))

        curve = location.Curve
        try:
            segment = geometry.Segment(to_xyz(curve.GetEndPoint(0)), to_xyz(curve.GetEndPoint(1)))
        except ValueError as e:
            return None, Failure(ErrorKind.NO_LINEAR_LOCATION, detail="{}: {}".format(self.describe(element_ref), e))
        return segment, None

    def to_internal_units(self, value, unit_name="Meters"):
        """Dialog value -> feet. `unit_name` is a UnitTypeId property name."""
        unit_id = getattr(UnitTypeId, unit_name)
        return UnitUtils.ConvertToInternalUnits(value, unit_id)

    def move(self, placement):
        ElementTransformUtils.MoveElement(
            self.doc, placement.element_ref, to_revit_xyz(placement.translation))

    def apply_translations(self, placements):
        t = Transaction(self.doc, TRANSACTION_NAME)
        return apply_in_transaction(t, placements, self.move, TransactionStatus.Committed)
