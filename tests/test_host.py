# -*- coding: utf-8 -*-
from mep_equalize import ErrorKind, XYZ
from mep_equalize.data_model import Placement
from mep_equalize.host import apply_in_transaction

COMMITTED = "Committed"
ROLLED_BACK = "RolledBack"


class FakeTransaction(object):
    """Mimics DB.Transaction: Start / Commit / RollBack / HasEnded."""
    def __init__(self, commit_status=COMMITTED, commit_error=None):
        self.commit_status = commit_status
        self.commit_error = commit_error
        self.calls = []
        self.ended = False

    def Start(self):
        self.calls.append("Start")

    def Commit(self):
        self.calls.append("Commit")
        if self.commit_error:
            raise RuntimeError(self.commit_error)
        self.ended = True
        return self.commit_status

    def RollBack(self):
        self.calls.append("RollBack")
        self.ended = True

    def HasEnded(self):
        return self.ended


def placements():
    return [
        Placement("b", 1, 2.0, XYZ(0, -3, 0)),
        Placement("c", 2, 4.0, XYZ.ZERO, needs_move=False),
        Placement("d", 3, 6.0, XYZ(0, 1, 0)),
    ]


def test_moves_only_placements_that_need_it():
    moved = []
    t = FakeTransaction()
    failure = apply_in_transaction(t, placements(), lambda p: moved.append(p.element_ref), COMMITTED)

    assert failure is None
    assert moved == ["b", "d"]
    assert t.calls == ["Start", "Commit"]


def test_nothing_to_move_opens_no_transaction():
    t = FakeTransaction()
    failure = apply_in_transaction(t, placements()[1:2], lambda p: None, COMMITTED)

    assert failure is None
    assert t.calls == []


def test_move_error_rolls_back():
    def move(placement):
        if placement.element_ref == "d":
            raise RuntimeError("Element is pinned.")

    t = FakeTransaction()
    failure = apply_in_transaction(t, placements(), move, COMMITTED)

    assert failure.kind == ErrorKind.TRANSACTION_FAILURE
    assert failure.message == "Element is pinned."
    assert t.calls == ["Start", "RollBack"]


def test_commit_error_is_a_failure():
    t = FakeTransaction(commit_error="Regeneration failed.")
    failure = apply_in_transaction(t, placements(), lambda p: None, COMMITTED)

    assert failure.kind == ErrorKind.TRANSACTION_FAILURE
    assert failure.message == "Regeneration failed."
    assert t.calls == ["Start", "Commit", "RollBack"]


def test_commit_without_committed_status_is_a_failure():
    t = FakeTransaction(commit_status=ROLLED_BACK)
    failure = apply_in_transaction(t, placements(), lambda p: None, COMMITTED)

    assert failure.kind == ErrorKind.TRANSACTION_FAILURE
    assert ROLLED_BACK in failure.message
    assert t.calls == ["Start", "Commit"]
