"""
System handlers
"""

from datetime import datetime
from typing import Any, Dict

from . import api_handler


@api_handler(
    method="GET",
    path="/test",
    tags=["system"],
    summary="Connectivity check",
    description="Used by the browser UI to verify the API server is reachable",
)
async def check_connection() -> Dict[str, Any]:
    """Connectivity check"""
    return {
        "message": "API server is running",
        "timestamp": datetime.now().isoformat(),
    }
