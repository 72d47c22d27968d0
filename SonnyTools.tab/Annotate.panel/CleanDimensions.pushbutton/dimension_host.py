# -*- coding: utf-8 -*-
"""Narrow boundary between the cleanup logic and the Revit document.

Only this module and script.py touch Revit API types, and this module
imports them lazily so the rest of the package stays testable outside Revit.
"""


class DimensionSnapshot(object):
    def __init__(self, element_id, segment_values, references, overall_value):
        self.element_id = element_id
        self.segment_values = list(segment_values)
        self.references = list(references)
        self.overall_value = overall_value

    @property
    def segment_count(self):
        return len(self.segment_values)

    def to_dict(self):
        return {
            "element_id": element_id_value(self.element_id),
            "segment_values": list(self.segment_values),
            "reference_count": len(self.references),
            "overall_value": self.overall_value,
        }


def element_id_value(element_id):
    if element_id is None:
        return None
    for attr in ("Value", "IntegerValue"):
        try:
            return int(getattr(element_id, attr))
        except (AttributeError, TypeError, ValueError):
            continue
    return element_id


def _as_list(items):
    if items is None:
        return []
    return [x for x in items]


def snapshot_dimension(dimension):
    segments = _as_list(getattr(dimension, "Segments", None))
    references = _as_list(getattr(dimension, "References", None))
    return DimensionSnapshot(
        element_id=getattr(dimension, "Id", None),
        segment_values=[s.Value for s in segments],
        references=references,
        overall_value=getattr(dimension, "Value", None),
    )


def _new_reference_array():
    from Autodesk.Revit.DB import ReferenceArray
    return ReferenceArray()


def _new_sub_transaction(doc):
    from Autodesk.Revit.DB import SubTransaction
    return SubTransaction(doc)


class RevitDimensionHost(object):
    """Deletes and creates dimensions in one document.

    Host exceptions (e.g. an invalid reference set) are not caught here.
    """

    def __init__(self, doc, array_factory=None, item_factory=None):
        self.doc = doc
        self.array_factory = array_factory or _new_reference_array
        self.item_factory = item_factory or _new_sub_transaction
        self._item = None

    def delete_annotation(self, element_id):
        self.doc.Delete(element_id)

    def build_annotation(self, view, line, references, dimension_type=None):
        refs = self.array_factory()
        for r in references:
            refs.Append(r)

        if dimension_type is not None:
            return self.doc.Create.NewDimension(view, line, refs, dimension_type)
        return self.doc.Create.NewDimension(view, line, refs)

    # One SubTransaction per cleaned dimension, inside the caller's Transaction.
    def begin_item(self):
        self._item = self.item_factory(self.doc)
        self._item.Start()

    def commit_item(self):
        item, self._item = self._item, None
        if item is not None:
            item.Commit()

    def rollback_item(self):
        item, self._item = self._item, None
        if item is not None:
            item.RollBack()
