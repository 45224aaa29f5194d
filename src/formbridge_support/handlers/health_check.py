"""Lightweight health check handler."""

import os
import json
from datetime import datetime, timezone

from formbridge_support.handlers import dependencies


def lambda_handler(event, context):
    """Return 200 with the loaded corpus size to verify the container is usable."""
    return {
        "statusCode": 200,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps(
            {
                "status": "ok",
                "environment": os.environ.get("ENVIRONMENT", "dev"),
                "knowledgeEntries": len(dependencies.get_store()),
                "timestamp": datetime.now(timezone.utc).isoformat(),
            }
        ),
    }
