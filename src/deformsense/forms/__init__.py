"""Form recording and recognition.

Forms are reference directions captured from the live vector; recognition
scores the current direction against every stored sample of a label.
"""

from .store import UNLABELED, Form, FormStore, FormView

__all__ = ["UNLABELED", "Form", "FormStore", "FormView"]
