"""Recorded reference forms and similarity-based recognition."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Tuple

from numpy.typing import ArrayLike

from ..core.vector import Vector

logger = logging.getLogger(__name__)

UNLABELED = ""


class Form:
    """
    A label plus one or more reference directions.

    Samples are stored as unit directions. :meth:`recognize` returns the best
    directional fit across all samples, never less than 0.
    """

    __slots__ = ("_label", "_samples")

    def __init__(self, label: str = UNLABELED, sample: Optional[ArrayLike | Vector] = None) -> None:
        self._label = str(label)
        self._samples: List[Vector] = []
        if sample is not None:
            self.add(sample)

    @property
    def label(self) -> str:
        return self._label

    @property
    def samples(self) -> Tuple[Vector, ...]:
        return tuple(self._samples)

    def is_labeled(self, label: str) -> bool:
        return self._label == label

    def record(self, sample: ArrayLike | Vector) -> None:
        """Replace every stored sample with ``sample``."""
        self._samples = [_as_direction(sample)]

    def add(self, sample: ArrayLike | Vector) -> None:
        """Append ``sample`` as an additional template for this form."""
        self._samples.append(_as_direction(sample))

    def recognize(self, current: ArrayLike | Vector) -> float:
        if not isinstance(current, Vector):
            current = Vector(current)
        fit = 0.0
        for sample in self._samples:
            score = sample.dot(current)
            if score > fit:
                fit = score
        return fit

    def view(self) -> "FormView":
        return FormView(self._label, tuple(self._samples))

    def __len__(self) -> int:
        return len(self._samples)

    def __repr__(self) -> str:
        return f"Form(label={self._label!r}, samples={len(self._samples)})"


@dataclass(frozen=True)
class FormView:
    """Read-only copy of a form handed out by the engine."""

    label: str
    samples: Tuple[Vector, ...]

    def __len__(self) -> int:
        return len(self.samples)


def _as_direction(sample: ArrayLike | Vector) -> Vector:
    vector = sample if isinstance(sample, Vector) else Vector(sample)
    return Vector(vector.direction())


class FormStore:
    """Mapping of label -> :class:`Form`, iterated in recording order."""

    def __init__(self) -> None:
        self._forms: Dict[str, Form] = {}

    def record(self, label: str, sample: ArrayLike | Vector) -> Form:
        """
        Store ``sample`` under ``label``, overwriting any earlier samples.

        Returns the (new or existing) form.
        """
        form = self._forms.get(label)
        if form is None:
            form = Form(label, sample)
            self._forms[label] = form
            logger.info("Recorded new form %r", label)
        else:
            form.record(sample)
            logger.info("Re-recorded form %r (previous samples overwritten)", label)
        return form

    def add(self, label: str, sample: ArrayLike | Vector) -> Form:
        """Append ``sample`` to the form under ``label``, creating it when missing."""
        form = self._forms.get(label)
        if form is None:
            form = Form(label, sample)
            self._forms[label] = form
        else:
            form.add(sample)
        logger.info("Added sample %d to form %r", len(form), label)
        return form

    def recognize(self, label: str, current: ArrayLike | Vector) -> float:
        """Best fit of ``current`` against ``label``; 0 for an unknown label."""
        form = self._forms.get(label)
        if form is None:
            return 0.0
        return form.recognize(current)

    def get(self, label: str) -> Optional[Form]:
        return self._forms.get(label)

    def remove(self, label: str) -> bool:
        return self._forms.pop(label, None) is not None

    def clear(self) -> None:
        self._forms.clear()

    def labels(self) -> List[str]:
        return list(self._forms.keys())

    def forms(self) -> List[Form]:
        """Return a snapshot list of the stored forms."""
        return list(self._forms.values())

    def __contains__(self, label: object) -> bool:
        return label in self._forms

    def __iter__(self) -> Iterator[Form]:
        return iter(self.forms())

    def __len__(self) -> int:
        return len(self._forms)


__all__ = ["UNLABELED", "Form", "FormStore", "FormView"]
