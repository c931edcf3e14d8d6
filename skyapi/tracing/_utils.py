import inspect
import json
import logging
from typing import Any, Dict

logger = logging.getLogger(__name__)


class _SpanUtils:
    @staticmethod
    def format_args_for_trace_json(
        signature: inspect.Signature, *args: Any, **kwargs: Any
    ) -> str:
        """Return a JSON string of inputs from the function signature."""
        result = _SpanUtils.format_args_for_trace(signature, *args, **kwargs)
        return json.dumps(result, default=str)

    @staticmethod
    def format_args_for_trace(
        signature: inspect.Signature, *args: Any, **kwargs: Any
    ) -> Dict[str, Any]:
        """Return a dictionary of inputs from the function signature."""
        try:
            parameter_binding = signature.bind_partial(*args, **kwargs)
            parameter_binding.apply_defaults()
        except TypeError as e:
            logger.warning(
                f"Error formatting arguments for trace: {e}. Using args and kwargs directly."
            )
            return {"args": args, "kwargs": kwargs}

        result: Dict[str, Any] = {}
        for name, value in parameter_binding.arguments.items():
            if name in ("self", "cls"):
                continue

            param_info = signature.parameters.get(name)
            if param_info and param_info.kind == inspect.Parameter.VAR_KEYWORD:
                if isinstance(value, dict):
                    result.update(value)
            elif value is not None:
                result[name] = value

        return result
