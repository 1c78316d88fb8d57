"""
Handler modules with automatic API registration
Handlers are declared with @api_handler and mounted on a FastAPI app in bulk
"""

import inspect
from typing import (
    TYPE_CHECKING,
    Any,
    Callable,
    Dict,
    List,
    Optional,
    Type,
    TypeVar,
)

from daily_record.core.logger import get_logger

if TYPE_CHECKING:
    from fastapi import FastAPI

logger = get_logger(__name__)

F = TypeVar("F", bound=Callable[..., Any])

# Global API handler registry
_handler_registry: Dict[str, Dict[str, Any]] = {}

_SUPPORTED_METHODS = ("GET", "POST", "PUT", "DELETE", "PATCH")


def api_handler(
    body: Optional[Type] = None,
    method: str = "POST",
    path: Optional[str] = None,
    tags: Optional[List[str]] = None,
    summary: Optional[str] = None,
    description: Optional[str] = None,
):
    """
    API handler decorator

    @param body - Optional request model type (documentation only, FastAPI reads the signature)
    @param method - HTTP method (GET, POST, PUT, DELETE, PATCH)
    @param path - Route path relative to the prefix, defaults to /{function name}
    @param tags - API tags
    @param summary - API summary
    @param description - API description
    """

    def decorator(func: F) -> F:
        func_name = getattr(func, "__name__", "unknown")
        func_module = getattr(func, "__module__", "")
        module_name = func_module.split(".")[-1] if func_module else "unknown"
        func_doc = inspect.getdoc(func)

        _handler_registry[func_name] = {
            "func": func,
            "body": body,
            "method": method.upper(),
            "path": path or f"/{func_name}",
            "tags": tags or [module_name],
            "module": module_name,
            "summary": summary or (func_doc.split("\n")[0] if func_doc else func_name),
            "description": description or func_doc or "",
        }

        # Keep original function unchanged
        return func

    return decorator


def get_registered_handlers() -> Dict[str, Dict[str, Any]]:
    """
    Get registered handler information (for debugging)

    @returns Handler registry
    """
    return _handler_registry.copy()


def register_fastapi_routes(app: "FastAPI", prefix: str = "/api") -> None:
    """
    Automatically register all functions decorated with @api_handler as FastAPI routes

    @param app - FastAPI application instance
    @param prefix - Route prefix
    """
    logger.info(
        f"Starting FastAPI route registration, {len(_handler_registry)} handlers"
    )

    registered = 0
    for handler_name, handler_info in _handler_registry.items():
        method = handler_info["method"]
        if method not in _SUPPORTED_METHODS:
            logger.warning(f"Unknown HTTP method: {method} for {handler_name}")
            continue

        full_path = f"{prefix}{handler_info['path']}"
        app.add_api_route(
            full_path,
            handler_info["func"],
            methods=[method],
            tags=handler_info["tags"],
            summary=handler_info["summary"],
            description=handler_info["description"],
            response_model=None,
        )
        registered += 1
        logger.debug(
            f"✓ Registered route: {method} {full_path} ({handler_name} from {handler_info['module']})"
        )

    logger.info(f"FastAPI route registration completed: {registered} routes")


# Import all handler modules to trigger decorator registration
# Note: These imports must be after all decorator definitions to avoid circular imports
# ruff: noqa: E402
from . import (
    events,
    layout,
    statistics,
    system,
    templates,
    transfer,
)

__all__ = [
    "api_handler",
    "register_fastapi_routes",
    "get_registered_handlers",
    "events",
    "layout",
    "statistics",
    "system",
    "templates",
    "transfer",
]
