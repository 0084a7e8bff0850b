from textstyles.model.diagnostic import Diagnostic, Severity

__all__ = ["Diagnostic", "Severity"]
