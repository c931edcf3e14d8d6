from ._traced import redact_inputs, traced  # noqa: D104

__all__ = ["redact_inputs", "traced"]
