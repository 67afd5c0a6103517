# -*- coding: utf-8 -*-
"""Typed failures and the value objects passed between Equalizer and host."""


class ErrorKind(object):
    INSUFFICIENT_SELECTION = "InsufficientSelection"
    UNSUPPORTED_ELEMENT_KIND = "UnsupportedElementKind"
    NO_LINEAR_LOCATION = "NoLinearLocation"
    NOT_PARALLEL = "NotParallel"
    INVALID_DISTANCE = "InvalidDistance"
    TRANSACTION_FAILURE = "TransactionFailure"


# User-facing message per failure kind. TransactionFailure carries the host text instead.
DEFAULT_MESSAGES = {
    ErrorKind.INSUFFICIENT_SELECTION: "Please select at least two elements.",
    ErrorKind.UNSUPPORTED_ELEMENT_KIND: "Selected elements must be pipes, ducts, or conduits.",
    ErrorKind.NO_LINEAR_LOCATION: "Location curves could not be retrieved.",
    ErrorKind.NOT_PARALLEL: "Selected elements are not parallel.",
    ErrorKind.INVALID_DISTANCE: "Invalid distance entered.",
    ErrorKind.TRANSACTION_FAILURE: "The transaction could not be completed.",
}


class Failure(object):
    """
    Typed failure returned (not raised) across the library boundary.
    `detail` holds diagnostic context for the report, e.g. the offending element.
    """
    def __init__(self, kind, message=None, detail=None):
        self.kind = kind
        self.message = message or DEFAULT_MESSAGES.get(kind, kind)
        self.detail = detail

    def __repr__(self):
        return "Failure({}: {})".format(self.kind, self.message)


class Placement(object):
    """
    Computed move for one non-reference element.
    """
    def __init__(self, element_ref, index, offset, translation, needs_move=True):
        self.element_ref = element_ref
        self.index = index              # position in the full selection, reference is 0
        self.offset = offset            # signed distance from the reference line
        self.translation = translation  # geometry.XYZ
        self.needs_move = needs_move

    def __repr__(self):
        return "Placement(#{} {!r} offset={} move={!r})".format(
            self.index, self.element_ref, self.offset, self.translation)


class EqualizeJob(object):
    """
    A validated selection: ordered element refs with their location segments.
    Index 0 is the reference element, which never moves.
    """
    def __init__(self, element_refs, segments, perpendicular):
        if len(element_refs) != len(segments):
            raise ValueError("Each element needs exactly one segment.")
        self.element_refs = list(element_refs)
        self.segments = list(segments)
        self.perpendicular = perpendicular  # offset direction, from the reference

    @property
    def reference_ref(self):
        return self.element_refs[0]

    @property
    def reference(self):
        return self.segments[0]

    @property
    def targets(self):
        """(element_ref, segment) pairs for every element except the reference."""
        return list(zip(self.element_refs[1:], self.segments[1:]))

    def __len__(self):
        return len(self.element_refs)


class EqualizeResult(object):
    def __init__(self, placements=None, failure=None):
        self.placements = placements or []
        self.failure = failure

    @property
    def ok(self):
        return self.failure is None

    @property
    def moved_count(self):
        if not self.ok:
            return 0
        return len([p for p in self.placements if p.needs_move])

    @classmethod
    def failed(cls, kind, message=None, detail=None, placements=None):
        return cls(placements=placements, failure=Failure(kind, message, detail))
