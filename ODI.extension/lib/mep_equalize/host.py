# -*- coding: utf-8 -*-
from mep_equalize.data_model import ErrorKind, Failure


class LinearElementHost(object):
    """
    What the Equalizer needs from the host application.
    Element refs are opaque: only the host looks inside them.
    """

    def is_supported(self, element_ref):
        """True for pipe-, duct- and conduit-like elements."""
        raise NotImplementedError

    def get_location_segment(self, element_ref):
        """Returns (Segment, None) or (None, Failure(NoLinearLocation))."""
        raise NotImplementedError

    def apply_translations(self, placements):
        """
        Moves every placement with needs_move as one unit of work.
        Returns None on success or Failure(TransactionFailure); nothing moves on failure.
        """
        raise NotImplementedError

    def describe(self, element_ref):
        return str(element_ref)


def apply_in_transaction(transaction, placements, move, committed_status):
    """
    Runs move(placement) for every placement with needs_move inside `transaction`
    (Start / Commit / RollBack / HasEnded, as Revit's DB.Transaction).
    Only a Commit returning `committed_status` counts as success.
    """
    moves = [p for p in placements if p.needs_move]
    if not moves:
        return None

    try:
        transaction.Start()
        for placement in moves:
            move(placement)
    except Exception as e:
        if not transaction.HasEnded():
            transaction.RollBack()
        return Failure(ErrorKind.TRANSACTION_FAILURE, str(e))

    try:
        status = transaction.Commit()
    except Exception as e:
        if not transaction.HasEnded():
            transaction.RollBack()
        return Failure(ErrorKind.TRANSACTION_FAILURE, str(e))

    if status != committed_status:
        return Failure(ErrorKind.TRANSACTION_FAILURE,
                       "Transaction was not committed ({}).".format(status))
    return None
